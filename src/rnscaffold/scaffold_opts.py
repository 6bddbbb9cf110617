"""Options dataclass for the rnscaffold command."""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class ScaffoldOpts:
    """All options for the rnscaffold command."""

    directory: str
    name: Optional[str] = None
    bundle: Optional[str] = None
    navigation: Optional[str] = None
    drawer: Optional[str] = None
    tab: Optional[str] = None
    icon: Optional[str] = None
    theme: Optional[str] = None
    theme_list: Optional[str] = None
    dry_run: bool = False

    def flags(self) -> Dict[str, Optional[str]]:
        """Pre-supplied answers keyed by question name."""
        return {
            "name": self.name,
            "bundle": self.bundle,
            "navigation": self.navigation,
            "drawer": self.drawer,
            "tab": self.tab,
            "icon": self.icon,
            "theme": self.theme,
            "themeList": self.theme_list,
        }
