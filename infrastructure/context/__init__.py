# infrastructure/context/__init__.py
from infrastructure.context.base_loader import ContextLoadError, ContextLoaderBase
from infrastructure.context.json_loader import JsonContextLoader
from infrastructure.context.loader_registry import ContextLoaderRegistry
from infrastructure.context.yaml_loader import YamlContextLoader

__all__ = [
    "ContextLoadError",
    "ContextLoaderBase",
    "ContextLoaderRegistry",
    "YamlContextLoader",
    "JsonContextLoader",
]
