"""StackAdvisor — Модуль конфігурації"""
from .settings import (
    StackAdvisorConfig,
    get_default_config,
    QuestionEngineConfig,
    CatalogConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml, config_from_dict

__all__ = [
    "StackAdvisorConfig",
    "get_default_config",
    "QuestionEngineConfig",
    "CatalogConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "config_from_dict",
]
