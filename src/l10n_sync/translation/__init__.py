"""
Translation platform clients.

``create_client`` builds the client selected by ``platform.backend``.
"""

from ..config.schema import SyncConfig
from ..sync.types import TranslationClient
from .command import CommandLineClient
from .weblate import WeblateClient


def create_client(config: SyncConfig) -> TranslationClient:
    """
    Create the translation platform client for a configuration.

    Args:
        config: Sync configuration with resolved repository paths

    Returns:
        The configured client
    """
    repository = config.repository
    platform = config.platform

    match platform.backend:
        case "weblate":
            return WeblateClient(
                platform.weblate,
                root=repository.root,
                translations_dir=repository.translations_dir,
            )
        case "command":
            return CommandLineClient(
                platform.pull_command,
                platform.push_command,
                cwd=repository.root,
            )


__all__ = ["CommandLineClient", "WeblateClient", "create_client"]
