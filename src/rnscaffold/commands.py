"""Builds the argument lists for the generator and rename tool.

Every command is a list of discrete arguments so unselected options
never leave empty tokens behind.
"""

from typing import List

from rnscaffold.request import ScaffoldRequest

GENERATOR = "react-native"
RENAME_TOOL = "react-native-rename"

NAVIGATION_PACKAGES = ["react-navigation", "react-navigation-stack"]
DRAWER_PACKAGE = "react-navigation-drawer"
TAB_PACKAGE = "react-navigation-tabs"
ICON_PACKAGE = "react-native-vector-icons"


def build_init_command(name: str) -> List[str]:
    return [GENERATOR, "init", name]


def build_link_command() -> List[str]:
    return [GENERATOR, "link"]


def dependency_packages(request: ScaffoldRequest) -> List[str]:
    """Packages selected by the request, in install order.

    Drawer and tab only count when navigation was chosen.
    """
    packages = []
    if request.navigation:
        packages.extend(NAVIGATION_PACKAGES)
        if request.drawer:
            packages.append(DRAWER_PACKAGE)
        if request.tab:
            packages.append(TAB_PACKAGE)
    if request.icon:
        packages.append(ICON_PACKAGE)
    theme_library = request.selected_theme_library
    if theme_library:
        packages.append(theme_library)
    return packages


def build_rename_command(request: ScaffoldRequest, with_name: bool = False) -> List[str]:
    """Build the rename invocation.

    Right after a global install the tool is also given the project name.
    """
    cmd = [RENAME_TOOL]
    if with_name:
        cmd.append(request.name)
    return cmd + ["-b", request.bundle_id]
