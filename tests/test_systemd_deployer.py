"""Tests pour le module systemd.deployer."""

from unittest.mock import MagicMock, call

import pytest

from nova_agent_watcher.cloudconfig.document import CloudConfig
from nova_agent_watcher.errors.exceptions import (
    CloudConfigError,
    ServiceManagerError,
)
from nova_agent_watcher.systemd.activation import UnitActivator
from nova_agent_watcher.systemd.base import Unit
from nova_agent_watcher.systemd.deployer import UnitDeployer
from nova_agent_watcher.systemd.placement import UnitPlacer


@pytest.fixture
def manager():
    """Gestionnaire de services mock."""
    return MagicMock()


@pytest.fixture
def deployer(manager, tmp_path):
    """Déployeur réel écrivant sous tmp_path."""
    logger = MagicMock()
    return UnitDeployer(
        UnitPlacer(logger),
        manager,
        UnitActivator(manager, logger),
        logger,
        root=str(tmp_path),
    )


class TestUnitDeployer:
    """Tests pour UnitDeployer.deploy()."""

    def test_document_vide(self, deployer, manager):
        """Un document vide ne touche pas à systemd."""
        assert deployer.deploy(CloudConfig()) == []
        assert manager.mock_calls == []

    def test_sequence_complete(self, deployer, manager, tmp_path):
        """Placement, activation, rechargement puis redémarrages."""
        config = CloudConfig(units=(
            Unit(name="50-eth0.network", content="[Match]\nName=eth0\n"),
            Unit(name="app.service", content="[Service]\n", enable=True),
        ))

        placed = deployer.deploy(config)

        app_path = str(tmp_path / "etc/systemd/system/app.service")
        assert placed == [
            str(tmp_path / "etc/systemd/network/50-eth0.network"),
            app_path,
        ]
        assert manager.mock_calls == [
            call.enable_unit_files([app_path], runtime=False, force=True),
            call.daemon_reload(),
            call.restart_unit("systemd-networkd.service"),
            call.restart_unit("app.service"),
        ]

    def test_activation_ephemere(self, deployer, manager, tmp_path):
        """Une unité éphémère activée l'est avec runtime=True."""
        deployer.deploy(CloudConfig(units=(
            Unit(name="a.service", runtime=True, enable=True),
        )))
        manager.enable_unit_files.assert_called_once_with(
            [str(tmp_path / "run/systemd/system/a.service")],
            runtime=True, force=True
        )

    def test_un_seul_daemon_reload(self, deployer, manager):
        """daemon-reload n'est appelé qu'une fois par document."""
        deployer.deploy(CloudConfig(units=(
            Unit(name="a.service"), Unit(name="b.service"),
        )))
        manager.daemon_reload.assert_called_once_with()

    def test_erreur_systemd_propagee(self, deployer, manager):
        """Un rechargement refusé interrompt le déploiement."""
        manager.daemon_reload.side_effect = ServiceManagerError("refusé")

        with pytest.raises(ServiceManagerError):
            deployer.deploy(CloudConfig(units=(Unit(name="a.service"),)))
        manager.restart_unit.assert_not_called()


class TestDeployFile:
    """Tests pour UnitDeployer.deploy_file()."""

    def test_depuis_fichier(self, deployer, manager, tmp_path):
        """Le fichier cloud-config est lu puis déployé."""
        source = tmp_path / "doc.yml"
        source.write_text(
            "#cloud-config\n"
            "coreos:\n"
            "  units:\n"
            "  - name: 50-eth0.network\n"
            "    content: |\n"
            "      [Match]\n"
            "      Name=eth0\n",
            encoding="utf-8",
        )

        placed = deployer.deploy_file(source)

        assert len(placed) == 1
        with open(placed[0], encoding="utf-8") as f:
            assert f.read() == "[Match]\nName=eth0\n"
        manager.restart_unit.assert_called_once_with(
            "systemd-networkd.service"
        )

    def test_document_invalide(self, deployer, tmp_path):
        """Un document mal formé lève CloudConfigError."""
        source = tmp_path / "doc.yml"
        source.write_text("coreos: [1, 2]\n", encoding="utf-8")

        with pytest.raises(CloudConfigError):
            deployer.deploy_file(source)

    def test_fichier_absent(self, deployer, tmp_path):
        """Un fichier absent lève OSError."""
        with pytest.raises(OSError):
            deployer.deploy_file(tmp_path / "absent.yml")
