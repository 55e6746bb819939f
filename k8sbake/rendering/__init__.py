from .context import BakeContext, RenderEngine
from .helm import HelmRenderEngine
from .kompose import KomposeRenderEngine
from .kustomize import KustomizeRenderEngine
from .paths import TemplatePathProvider, get_template_path
from .selector import ENGINES, select_engine

__all__ = [
    "BakeContext",
    "ENGINES",
    "HelmRenderEngine",
    "KomposeRenderEngine",
    "KustomizeRenderEngine",
    "RenderEngine",
    "TemplatePathProvider",
    "get_template_path",
    "select_engine",
]
