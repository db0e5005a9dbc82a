"""Package installation on top of a repository and an installer."""

from __future__ import annotations

from typing import Iterable, Optional

from homestead.entities import Package
from homestead.enums import PackageCategory
from homestead.errors import DependencyNotMetError, HomesteadError, InvalidInputError
from homestead.interfaces import PackageInstaller, PackageRepository, ProgressCallback


def _with_context(message: str, err: BaseException) -> HomesteadError:
    """Return an error of the same domain kind as err, prefixed with message."""
    if isinstance(err, HomesteadError):
        return type(err)(f"{message}: {err}")
    return HomesteadError(f"{message}: {err}")


class InstallerService:
    """Looks up, installs and removes packages."""

    def __init__(self, repo: PackageRepository, installer: PackageInstaller) -> None:
        self._repo = repo
        self._installer = installer

    def get_all_packages(self) -> list[Package]:
        """Return every available package."""
        try:
            return self._repo.find_all()
        except Exception as err:
            raise _with_context("get all packages", err) from err

    def get_packages_by_category(self, category: PackageCategory) -> list[Package]:
        """Return the packages in a category."""
        try:
            return self._repo.find_by_category(category)
        except Exception as err:
            raise _with_context(
                f"get packages by category {category}", err
            ) from err

    def get_packages_by_categories(
        self, categories: Iterable[PackageCategory]
    ) -> list[Package]:
        """Return packages from several categories, each package id only once."""
        seen: set[str] = set()
        result = []
        for category in categories:
            for package in self.get_packages_by_category(category):
                if package.id not in seen:
                    seen.add(package.id)
                    result.append(package)
        return result

    def get_package_by_id(self, package_id: str) -> Package:
        """Return the package with this id."""
        try:
            return self._repo.find_by_id(package_id)
        except Exception as err:
            raise _with_context(f"get package {package_id}", err) from err

    def install_package(
        self, package_id: str, progress_callback: Optional[ProgressCallback] = None
    ) -> None:
        """Install a package, reporting progress through the callback."""
        context = f"install package {package_id}"
        try:
            package = self._repo.find_by_id(package_id)
        except Exception as err:
            raise _with_context(context, err) from err
        try:
            package.validate()
        except InvalidInputError as err:
            raise InvalidInputError(f"{context}: invalid package: {err}") from err
        if not self._installer.can_install(package):
            raise DependencyNotMetError(
                f"{context}: system cannot install this package"
            )
        try:
            self._installer.install(package, progress_callback)
        except Exception as err:
            raise _with_context(context, err) from err

    def is_package_installed(self, package_id: str) -> bool:
        """Return True if the package is already installed."""
        context = f"check if package {package_id} installed"
        try:
            package = self._repo.find_by_id(package_id)
            return self._installer.is_installed(package)
        except Exception as err:
            raise _with_context(context, err) from err

    def uninstall_package(self, package_id: str) -> None:
        """Remove an installed package."""
        context = f"uninstall package {package_id}"
        try:
            package = self._repo.find_by_id(package_id)
            self._installer.uninstall(package)
        except Exception as err:
            raise _with_context(context, err) from err