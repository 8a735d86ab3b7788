"""StackAdvisor — Завантаження конфігурації"""
import yaml
from pathlib import Path
from dataclasses import asdict
from .settings import StackAdvisorConfig, QuestionEngineConfig, CatalogConfig


def save_yaml(config: StackAdvisorConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(asdict(config), f, default_flow_style=False)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def config_from_dict(data: dict) -> StackAdvisorConfig:
    """Зібрати StackAdvisorConfig зі словника (невідомі ключі ігноруються)"""
    data = dict(data)
    engine = data.pop("question_engine", None) or {}
    catalog = data.pop("catalog", None) or {}

    top_level = {
        k: v for k, v in data.items()
        if k in StackAdvisorConfig.__dataclass_fields__
    }
    return StackAdvisorConfig(
        question_engine=QuestionEngineConfig(**{
            k: v for k, v in engine.items()
            if k in QuestionEngineConfig.__dataclass_fields__
        }),
        catalog=CatalogConfig(**{
            k: v for k, v in catalog.items()
            if k in CatalogConfig.__dataclass_fields__
        }),
        **top_level,
    )


def save_config(config: StackAdvisorConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> StackAdvisorConfig:
    return config_from_dict(load_yaml(path))
