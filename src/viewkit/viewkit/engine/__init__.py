"""viewkit.engine - template groups, helper functions and compilation phases."""

from viewkit.engine.common import load_common_templates
from viewkit.engine.funcs import DEFAULT_FUNCS, FuncMap, build_funcs
from viewkit.engine.group import TemplateGroup
from viewkit.engine.pages import compile_pages, page_id

__all__ = [
    "DEFAULT_FUNCS",
    "FuncMap",
    "TemplateGroup",
    "build_funcs",
    "compile_pages",
    "load_common_templates",
    "page_id",
]
