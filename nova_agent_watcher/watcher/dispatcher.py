"""Surveillance des fichiers enregistrés et déclenchement des handlers.

Deux fils d'exécution :
- le fil principal installe les surveillances, exécute chaque handler
  une première fois, puis attend la fin ;
- un fil consommateur unique traite les événements un par un, dans
  leur ordre d'arrivée.

Seule une erreur du canal de surveillance arrête l'agent ; les erreurs
des handlers sont journalisées et la surveillance continue.
"""

import os
import queue
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Union

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from nova_agent_watcher.cloudconfig.document import CloudConfig
from nova_agent_watcher.errors.exceptions import (
    HandlerNotFoundError,
    WatchError,
)
from nova_agent_watcher.errors.logger_handler import LoggerErrorHandler
from nova_agent_watcher.logging.base import Logger
from nova_agent_watcher.watcher.registry import WatchRegistry


@dataclass(frozen=True)
class ChangeEvent:
    """Modification d'un fichier surveillé.

    Attributes:
        path: Chemin absolu du fichier.
        created: True si le fichier vient d'être créé (ou déplacé
            dans le répertoire surveillé).
    """

    path: str
    created: bool


@dataclass(frozen=True)
class WatchErrorEvent:
    """Erreur du canal de surveillance."""

    error: WatchError


Event = Union[ChangeEvent, WatchErrorEvent]


class Materializer(Protocol):
    def materialize(self, config: CloudConfig) -> str: ...


class QueueingEventHandler(FileSystemEventHandler):
    """Traduit les événements watchdog en événements de la file.

    Seuls les fichiers enregistrés produisent des ChangeEvent. La
    disparition d'un répertoire surveillé produit un WatchErrorEvent.
    """

    def __init__(
        self,
        events: "queue.Queue[Event]",
        watched_files: frozenset[str],
        watched_directories: frozenset[str]
    ) -> None:
        super().__init__()
        self.events = events
        self.watched_files = watched_files
        self.watched_directories = watched_directories

    def on_any_event(self, event: FileSystemEvent) -> None:
        src_path = os.path.normpath(os.fsdecode(event.src_path))

        if event.is_directory:
            if (
                event.event_type in (EVENT_TYPE_DELETED, EVENT_TYPE_MOVED)
                and src_path in self.watched_directories
            ):
                self.events.put(WatchErrorEvent(WatchError(
                    f"Répertoire surveillé disparu: {src_path}"
                )))
            return

        if event.event_type == EVENT_TYPE_MOVED:
            # Un fichier renommé vers un chemin surveillé y est créé
            path = os.path.normpath(os.fsdecode(event.dest_path))
            created = True
        else:
            path = src_path
            created = event.event_type == EVENT_TYPE_CREATED

        if path in self.watched_files:
            self.events.put(ChangeEvent(path=path, created=created))


class PathChangeDispatcher:
    """Surveille les fichiers de la table et exécute leurs handlers.

    États : surveillance active puis arrêt définitif (terminated).
    Une fois arrêté, plus aucun événement n'est traité.

    Attributes:
        registry: Table chemin -> handler.
        watch_dir: Racine sous laquelle les chemins de la table sont
            résolus.
        materializer: Destinataire des documents produits.
        logger: Instance de Logger pour le logging.
    """

    def __init__(
        self,
        registry: WatchRegistry,
        watch_dir: str,
        materializer: Materializer,
        logger: Logger,
        observer_factory: Callable[[], Observer] = Observer,
        poll_interval: float = 1.0
    ) -> None:
        """
        Initialise le dispatcher.

        Args:
            registry: Table chemin -> handler
            watch_dir: Racine des chemins surveillés
            materializer: Destinataire des documents produits
            logger: Instance de Logger pour le logging
            observer_factory: Fabrique de l'observateur watchdog
            poll_interval: Délai (s) entre deux vérifications de
                l'observateur quand la file est vide
        """
        self.registry = registry
        self.watch_dir = os.path.abspath(watch_dir)
        self.materializer = materializer
        self.logger = logger
        self.events: "queue.Queue[Event]" = queue.Queue()
        self._observer_factory = observer_factory
        self._observer: Optional[Observer] = None
        self._poll_interval = poll_interval
        self._terminated = threading.Event()
        self._error: Optional[WatchError] = None
        self._error_handler = LoggerErrorHandler(
            logger, prefix="Erreur de traitement de l'événement: "
        )

    @property
    def terminated(self) -> bool:
        """True une fois la surveillance arrêtée."""
        return self._terminated.is_set()

    @property
    def error(self) -> Optional[WatchError]:
        """Erreur de surveillance ayant arrêté le dispatcher."""
        return self._error

    def watched_path(self, key: str) -> str:
        """
        Chemin absolu d'une entrée de la table.

        Args:
            key: Chemin de la table (ex: "/etc/conf.d/net")

        Returns:
            Chemin sous watch_dir
        """
        return os.path.normpath(
            os.path.join(self.watch_dir, key.lstrip("/"))
        )

    def registry_key(self, path: str) -> str:
        """
        Entrée de la table correspondant à un chemin absolu.

        Args:
            path: Chemin absolu sous watch_dir

        Returns:
            Chemin relatif à watch_dir, préfixé par "/"
        """
        relative = os.path.relpath(os.path.abspath(path), self.watch_dir)
        return os.path.join("/", relative)

    def run_event(self, path: str) -> str:
        """
        Exécute le handler d'un chemin et matérialise son document.

        Args:
            path: Chemin absolu du fichier modifié

        Returns:
            Nom de l'unité transitoire lancée

        Raises:
            OSError: Si le fichier n'existe plus
            HandlerNotFoundError: Si aucun handler ne correspond
        """
        os.stat(path)
        key = self.registry_key(path)
        handler = self.registry.get(key)
        if handler is None:
            raise HandlerNotFoundError(
                f"Aucun handler pour {path} (clé {key})"
            )
        config = handler(path)
        return self.materializer.materialize(config)

    def dispatch(self, event: Event) -> None:
        """
        Traite un événement de la file.

        Args:
            event: Événement de modification ou d'erreur
        """
        if self.terminated:
            return

        if isinstance(event, WatchErrorEvent):
            self.fail(event.error)
            return

        # Seul le remplacement du fichier déclenche une régénération
        if not event.created:
            self.logger.log_debug(f"Événement ignoré: {event.path}")
            return
        self.logger.log_info(f"Fichier remplacé: {event.path}")

        try:
            self.run_event(event.path)
        except Exception as e:
            self._error_handler.handle(e)

    def fail(self, error: WatchError) -> None:
        """
        Arrête définitivement la surveillance sur erreur.

        Args:
            error: Erreur du canal de surveillance
        """
        if self.terminated:
            return
        self.logger.log_error(f"Erreur de surveillance: {error}")
        self._error = error
        self._terminated.set()

    def stop(self) -> None:
        """Arrête la surveillance sans erreur."""
        self._terminated.set()

    def consume(self) -> None:
        """Traite les événements jusqu'à l'arrêt (fil consommateur)."""
        while not self.terminated:
            try:
                event = self.events.get(timeout=self._poll_interval)
            except queue.Empty:
                self._check_observer()
                continue
            self.dispatch(event)

    def _check_observer(self) -> None:
        """Signale une erreur si l'observateur ou un émetteur est mort."""
        observer = self._observer
        if observer is None or self.terminated:
            return
        if not observer.is_alive():
            self.events.put(WatchErrorEvent(
                WatchError("L'observateur de fichiers s'est arrêté")
            ))
            return
        for emitter in observer.emitters:
            if not emitter.is_alive():
                self.events.put(WatchErrorEvent(WatchError(
                    f"Surveillance de {emitter.watch.path} interrompue"
                )))
                return

    def _build_handler(self) -> QueueingEventHandler:
        paths = [self.watched_path(key) for key in self.registry]
        return QueueingEventHandler(
            self.events,
            watched_files=frozenset(paths),
            watched_directories=frozenset(
                os.path.dirname(path) for path in paths
            ),
        )

    def bootstrap(self, path: str) -> None:
        """
        Exécute le handler d'un chemin au démarrage s'il existe.

        Args:
            path: Chemin absolu surveillé
        """
        if not os.path.exists(path):
            self.logger.log_info(f"{path} absent, rien à initialiser")
            return
        try:
            self.run_event(path)
        except Exception as e:
            self.logger.log_warning(
                f"L'événement d'initialisation a échoué pour {path}: {e}"
            )

    def run(self) -> None:
        """
        Surveille les fichiers jusqu'à l'arrêt.

        Raises:
            WatchError: Si la surveillance s'est arrêtée sur erreur
        """
        consumer = threading.Thread(
            target=self.consume, name="nova-agent-watcher", daemon=True
        )
        consumer.start()

        handler = self._build_handler()
        self._observer = self._observer_factory()
        self._observer.start()

        scheduled: set[str] = set()
        for key in self.registry:
            path = self.watched_path(key)
            directory = os.path.dirname(path)
            if directory not in scheduled:
                try:
                    self._observer.schedule(
                        handler, directory, recursive=False
                    )
                    scheduled.add(directory)
                except OSError as e:
                    self.logger.log_warning(
                        "Impossible de surveiller "
                        f"{directory} (répertoire absent ?): {e}"
                    )
            self.bootstrap(path)

        try:
            self._terminated.wait()
        finally:
            self._terminated.set()
            self._observer.stop()
            self._observer.join()
            consumer.join()

        if self._error is not None:
            raise self._error
