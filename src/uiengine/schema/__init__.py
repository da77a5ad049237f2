"""
Document schema
Component models, validation, and loading from JSON text
"""

from .models import (
    Action,
    Binding,
    BoundValue,
    ButtonComponent,
    Component,
    ContainerComponent,
    Document,
    GlobalConfig,
    InputComponent,
    LiteralValue,
    TextComponent,
    iter_nodes,
)
from .validator import DocumentValidator, validate, validate_or_raise
from .loader import DocumentLoader, load_document

__all__ = [
    "Action",
    "Binding",
    "BoundValue",
    "ButtonComponent",
    "Component",
    "ContainerComponent",
    "Document",
    "GlobalConfig",
    "InputComponent",
    "LiteralValue",
    "TextComponent",
    "iter_nodes",
    "DocumentValidator",
    "validate",
    "validate_or_raise",
    "DocumentLoader",
    "load_document",
]
