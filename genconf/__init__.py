"""Interactive authoring of template-generation configuration documents."""

from .models import Command, Document, FileSpec
from .values import infer_value
from .wizard import Wizard

__all__ = ["Command", "Document", "FileSpec", "Wizard", "infer_value"]
