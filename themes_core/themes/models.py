"""Data models for theme definitions and listings."""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class AssetCategory(str, Enum):
    """Asset lists a theme can declare; values match the definition file keys."""

    SCRIPTS = "scripts"
    FRONTEND_SCRIPTS = "frontend_scripts"
    BACKOFFICE_SCRIPTS = "backoffice_scripts"
    STYLES = "styles"
    FRONTEND_STYLES = "frontend_styles"
    BACKOFFICE_STYLES = "backoffice_styles"


class ThemeDefinition(BaseModel):
    """Declarations read from <theme>/<theme>.yaml. Every key is optional."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    description: Optional[str] = None
    regions: Optional[List[str]] = None
    parent: Optional[str] = None
    scripts: List[str] = []
    frontend_scripts: List[str] = []
    backoffice_scripts: List[str] = []
    styles: List[str] = []
    frontend_styles: List[str] = []
    backoffice_styles: List[str] = []

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_absent(cls, value: Any, info: ValidationInfo) -> Any:
        """A key written with no value (`scripts:`) counts as not declared."""
        if value is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    def declared(self, category: AssetCategory) -> List[str]:
        """Assets declared directly for a category."""
        return getattr(self, AssetCategory(category).value)


class ThemeListItem(BaseModel):
    """A summary item for listing available themes."""

    name: str
    description: str
    parent: Optional[str] = None
