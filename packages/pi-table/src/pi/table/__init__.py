"""pi-table: declarative table layout for document renderers."""

# Auto arrays
from pi.table.auto_array import AutoArray, expand_auto_array, has_generator, is_generator

# Flattening
from pi.table.children import get_children_in_fragments, normalize_children

# Layout components
from pi.table.components import (
    layout_auto_row,
    layout_auto_table,
    layout_row,
    layout_table,
    style_row_children,
)

# Configuration
from pi.table.config import LayoutConfig, load_config
from pi.table.context import RenderContext

# Diagnostics
from pi.table.diagnostics import Diagnostic, Diagnostics

# Elements
from pi.table.elements import (
    Element,
    ElementKind,
    auto_row,
    auto_table,
    create_element,
    element_to_dict,
    fragment,
    is_fragment,
    is_kind,
    row,
    table,
    text,
    view,
)

# Errors
from pi.table.errors import (
    AutoArrayLengthError,
    ColumnStyleMismatchError,
    EmptyTableError,
    GenerativeFirstRowError,
    InvalidFirstRowError,
    RowValidationError,
    TableLayoutError,
)

# Component registry
from pi.table.registry import (
    get_component,
    register_component,
    unregister_components,
)

# Rendering
from pi.table.render import render

# Styles
from pi.table.styles import (
    Style,
    from_px,
    merge_styles,
    style_value,
    total_width,
    width_from_col_styles,
)

__all__ = [
    # Auto arrays
    "AutoArray",
    "expand_auto_array",
    "has_generator",
    "is_generator",
    # Flattening
    "get_children_in_fragments",
    "normalize_children",
    # Components
    "layout_auto_row",
    "layout_auto_table",
    "layout_row",
    "layout_table",
    "style_row_children",
    # Configuration
    "LayoutConfig",
    "RenderContext",
    "load_config",
    # Diagnostics
    "Diagnostic",
    "Diagnostics",
    # Elements
    "Element",
    "ElementKind",
    "auto_row",
    "auto_table",
    "create_element",
    "element_to_dict",
    "fragment",
    "is_fragment",
    "is_kind",
    "row",
    "table",
    "text",
    "view",
    # Errors
    "AutoArrayLengthError",
    "ColumnStyleMismatchError",
    "EmptyTableError",
    "GenerativeFirstRowError",
    "InvalidFirstRowError",
    "RowValidationError",
    "TableLayoutError",
    # Registry
    "get_component",
    "register_component",
    "unregister_components",
    # Rendering
    "render",
    # Styles
    "Style",
    "from_px",
    "merge_styles",
    "style_value",
    "total_width",
    "width_from_col_styles",
]
