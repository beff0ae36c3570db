"""Tests pour le module systemd.activation et systemd.transient."""

from unittest.mock import MagicMock, call

import pytest

from nova_agent_watcher.errors.exceptions import ServiceManagerError
from nova_agent_watcher.systemd.activation import (
    UnitActivator,
    separate_network_units,
)
from nova_agent_watcher.systemd.base import Unit
from nova_agent_watcher.systemd.transient import execute_script, script_unit


class TestSeparateNetworkUnits:
    """Tests pour separate_network_units()."""

    def test_ordre_conserve(self):
        """L'ordre relatif est conservé dans chaque groupe."""
        units = [
            Unit(name="b.service"),
            Unit(name="50-eth1.network"),
            Unit(name="a.service"),
            Unit(name="50-eth0.network"),
        ]

        network, other = separate_network_units(units)

        assert [u.name for u in network] == [
            "50-eth1.network", "50-eth0.network"
        ]
        assert [u.name for u in other] == ["b.service", "a.service"]


class TestUnitActivator:
    """Tests pour UnitActivator."""

    def test_un_seul_redemarrage_reseau(self):
        """Plusieurs unités réseau donnent un seul redémarrage."""
        manager = MagicMock()
        activator = UnitActivator(manager, MagicMock())

        activator.activate([
            Unit(name="50-eth0.network"),
            Unit(name="50-eth1.network"),
            Unit(name="br0.netdev"),
        ])

        manager.restart_unit.assert_called_once_with(
            "systemd-networkd.service"
        )

    def test_reseau_puis_autres_dans_l_ordre(self):
        """Le service réseau est redémarré avant les autres unités."""
        manager = MagicMock()
        activator = UnitActivator(manager, MagicMock())

        activator.activate([
            Unit(name="docker.service"),
            Unit(name="50-eth0.network"),
            Unit(name="backup.timer"),
        ])

        assert manager.restart_unit.call_args_list == [
            call("systemd-networkd.service"),
            call("docker.service"),
            call("backup.timer"),
        ]

    def test_sans_unite_reseau(self):
        """Sans unité réseau, le service réseau n'est pas touché."""
        manager = MagicMock()
        UnitActivator(manager, MagicMock()).activate(
            [Unit(name="a.service")]
        )
        manager.restart_unit.assert_called_once_with("a.service")

    def test_service_reseau_configurable(self):
        """Le service réseau redémarré est configurable."""
        manager = MagicMock()
        UnitActivator(manager, MagicMock(), "networkd-test.service").activate(
            [Unit(name="50-eth0.network")]
        )
        manager.restart_unit.assert_called_once_with("networkd-test.service")

    def test_lot_vide(self):
        """Un lot vide ne provoque aucun appel."""
        manager = MagicMock()
        UnitActivator(manager, MagicMock()).activate([])
        manager.restart_unit.assert_not_called()

    def test_premiere_erreur_interrompt(self):
        """La première erreur arrête la séquence."""
        manager = MagicMock()
        manager.restart_unit.side_effect = [
            "job1", ServiceManagerError("refusé"), "job3"
        ]
        activator = UnitActivator(manager, MagicMock())

        with pytest.raises(ServiceManagerError):
            activator.activate([
                Unit(name="a.service"),
                Unit(name="b.service"),
                Unit(name="c.service"),
            ])
        assert manager.restart_unit.call_count == 2


class TestExecuteScript:
    """Tests pour l'exécution de scripts en unité transitoire."""

    def test_script_unit(self):
        """L'unité porte le nom du script et lance bash."""
        unit = script_unit("/var/lib/cloud/setup.sh")

        assert unit.name == "coreos-cloudinit-setup.sh.service"
        assert unit.argv == ("/bin/bash", "/var/lib/cloud/setup.sh")

    def test_execute_script(self):
        """Le script est lancé en mode replace et le nom retourné."""
        manager = MagicMock()

        name = execute_script(manager, "/tmp/run.sh")

        assert name == "coreos-cloudinit-run.sh.service"
        unit, mode = manager.start_transient_unit.call_args[0]
        assert unit.name == name
        assert mode == "replace"

    def test_execute_script_erreur_propagee(self):
        """Un refus de systemd est propagé."""
        manager = MagicMock()
        manager.start_transient_unit.side_effect = ServiceManagerError("x")

        with pytest.raises(ServiceManagerError):
            execute_script(manager, "/tmp/run.sh")
