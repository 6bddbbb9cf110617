"""Package manager selection: yarn is preferred, npm is the fallback."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class PackageManager:
    name: str
    add_args: List[str]
    global_add_args: List[str]
    global_add_suffix: List[str]

    def build_add_command(self, packages: List[str]) -> List[str]:
        return [self.name] + self.add_args + [p for p in packages if p]

    def build_global_install_command(self, package: str) -> List[str]:
        return [self.name] + self.global_add_args + [package] + self.global_add_suffix


YARN = PackageManager(
    name="yarn",
    add_args=["add"],
    global_add_args=["global", "add"],
    global_add_suffix=[],
)
NPM = PackageManager(
    name="npm",
    add_args=["install", "--save"],
    global_add_args=["install"],
    global_add_suffix=["-g"],
)

PREFERENCE_ORDER = (YARN, NPM)


def detect_package_manager(runner) -> Optional[PackageManager]:
    """Return the first package manager found on PATH, or None."""
    for manager in PREFERENCE_ORDER:
        if runner.which(manager.name):
            return manager
    return None
