"""ScaffoldRequest: the validated answers for one scaffolding run."""

import os
import re
from dataclasses import dataclass
from typing import Optional

from rnscaffold.errors import ValidationError

PROJECT_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
BUNDLE_ID_PATTERN = re.compile(r"[a-z0-9]+(\.[a-z0-9]+)+", re.IGNORECASE)

NO_THEME_LIBRARY = "None of the above required"
THEME_LIBRARIES = [
    "native-base",
    "react-native-elements",
    "react-native-material-ui",
    "react-native-paper",
    NO_THEME_LIBRARY,
]


def validate_project_name(value: str) -> str:
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        raise ValidationError(
            "Project name may only include letters, numbers, underscores and hyphens."
        )
    return value


def validate_bundle_identifier(value: str) -> str:
    if not BUNDLE_ID_PATTERN.fullmatch(value):
        raise ValidationError(
            "Provide a valid bundle identifier, e.g. com.example.app"
        )
    return value


@dataclass(frozen=True)
class ScaffoldRequest:
    """All user-supplied configuration for one run."""

    name: str
    bundle_id: str
    navigation: bool = False
    drawer: bool = False
    tab: bool = False
    icon: bool = False
    theme: bool = False
    theme_library: Optional[str] = None

    @property
    def wants_dependencies(self) -> bool:
        return self.navigation or self.icon or self.theme

    @property
    def selected_theme_library(self) -> Optional[str]:
        """The theme package to install, or None when no library applies."""
        if not self.theme or self.theme_library in (None, NO_THEME_LIBRARY):
            return None
        return self.theme_library

    def project_path(self, base_directory: str) -> str:
        return os.path.join(os.path.abspath(base_directory), self.name)
