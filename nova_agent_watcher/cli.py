"""Points d'entrée en ligne de commande.

- nova-agent-watcher : surveille les fichiers enregistrés et lance le
  déploiement des documents produits.
- nova-agent-deploy : déploie un document cloud-config
  (`--from-file`), tel que relancé dans une unité transitoire.
"""

from typing import Optional

import click

from nova_agent_watcher import __version__
from nova_agent_watcher.commands.runner import LinuxCommandExecutor
from nova_agent_watcher.config.settings import AgentSettings, load_settings
from nova_agent_watcher.errors.base import ErrorHandlerChain
from nova_agent_watcher.errors.console_handler import ConsoleErrorHandler
from nova_agent_watcher.errors.exceptions import (
    ApplicationError,
    FileConfigurationError,
)
from nova_agent_watcher.errors.logger_handler import LoggerErrorHandler
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.logging.file_logger import FileLogger
from nova_agent_watcher.systemd.activation import UnitActivator
from nova_agent_watcher.systemd.base import ServiceManager
from nova_agent_watcher.systemd.dbus_manager import DbusServiceManager
from nova_agent_watcher.systemd.deployer import UnitDeployer
from nova_agent_watcher.systemd.executor import SystemctlServiceManager
from nova_agent_watcher.systemd.placement import UnitPlacer
from nova_agent_watcher.watcher.dispatcher import PathChangeDispatcher
from nova_agent_watcher.watcher.materializer import RunMaterializer
from nova_agent_watcher.watcher.registry import build_registry


def build_service_manager(
    settings: AgentSettings,
    logger: Logger
) -> ServiceManager:
    """
    Instancie le gestionnaire de services choisi par la configuration.

    Args:
        settings: Configuration de l'agent
        logger: Instance de Logger pour le logging

    Returns:
        DbusServiceManager ou SystemctlServiceManager
    """
    if settings.systemd.backend == "systemctl":
        return SystemctlServiceManager(logger)
    return DbusServiceManager(logger)


def _setup(
    config_path: Optional[str]
) -> tuple[AgentSettings, Logger, ErrorHandlerChain]:
    """Charge la configuration, crée le logger et la chaîne d'erreurs."""
    errors = ErrorHandlerChain(ConsoleErrorHandler())
    try:
        settings = load_settings(config_path)
    except FileConfigurationError as e:
        errors.handle_and_exit(e)

    logger = FileLogger.from_settings(settings.logging)
    errors.add_handler(LoggerErrorHandler(logger))
    return settings, logger, errors


config_option = click.option(
    "-c", "--config", "config_path",
    default=None,
    type=click.Path(dir_okay=False),
    help="Fichier de configuration (TOML ou JSON).",
)


@click.command()
@click.version_option(version=__version__, prog_name="nova-agent-watcher")
@click.option(
    "--watch-dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Racine sous laquelle les chemins surveillés sont résolus.",
)
@config_option
def watch(watch_dir: str, config_path: Optional[str]) -> None:
    """Surveille la configuration réseau et redéploie les unités."""
    settings, logger, errors = _setup(config_path)

    manager = build_service_manager(settings, logger)
    registry = build_registry(
        settings.watcher.translator,
        LinuxCommandExecutor(logger=logger),
        logger,
    )
    materializer = RunMaterializer(
        manager,
        logger,
        deploy_command=settings.deploy.command,
        temp_prefix=settings.deploy.temp_prefix,
    )
    dispatcher = PathChangeDispatcher(
        registry, watch_dir, materializer, logger
    )

    logger.log_info(f"Surveillance de {dispatcher.watch_dir}")
    try:
        dispatcher.run()
    except KeyboardInterrupt:
        logger.log_info("Arrêt demandé.")
    except ApplicationError as e:
        errors.handle_and_exit(e)


@click.command()
@click.version_option(version=__version__, prog_name="nova-agent-deploy")
@click.option(
    "--from-file",
    "from_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Document cloud-config à déployer.",
)
@click.option(
    "--root",
    default=None,
    type=click.Path(file_okay=False),
    help="Racine du système cible (défaut: deploy.root).",
)
@config_option
def deploy(
    from_file: str,
    root: Optional[str],
    config_path: Optional[str]
) -> None:
    """Place et active les unités d'un document cloud-config."""
    settings, logger, errors = _setup(config_path)

    manager = build_service_manager(settings, logger)
    deployer = UnitDeployer(
        UnitPlacer(logger),
        manager,
        UnitActivator(
            manager, logger, settings.systemd.network_service
        ),
        logger,
        root=root or settings.deploy.root,
    )
    try:
        deployer.deploy_file(from_file)
    except (ApplicationError, OSError) as e:
        errors.handle_and_exit(e)
