from .process_detection import ProcessDetectionUseCase
from .get_model_status import GetModelStatusUseCase
from .get_detection_stats import GetDetectionStatsUseCase
from .update_ai_config import UpdateAIConfigUseCase

__all__ = [
    "ProcessDetectionUseCase",
    "GetModelStatusUseCase",
    "GetDetectionStatsUseCase",
    "UpdateAIConfigUseCase",
]
