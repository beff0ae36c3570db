"""Tests pour le module cloudconfig."""

import pytest
import yaml

from nova_agent_watcher.cloudconfig import HEADER, CloudConfig
from nova_agent_watcher.errors.exceptions import CloudConfigError
from nova_agent_watcher.systemd.base import Unit


NETWORK_CONTENT = "[Match]\nName=eth0\n\n[Network]\nDHCP=yes\n"


class TestCloudConfig:
    """Tests pour la construction du document."""

    def test_with_unit_immuable(self):
        """with_unit() retourne un nouveau document."""
        empty = CloudConfig()
        config = empty.with_unit(Unit(name="a.service"))

        assert empty.units == ()
        assert [u.name for u in config.units] == ["a.service"]

    def test_ordre_d_insertion(self):
        """Les unités gardent leur ordre d'insertion."""
        config = (
            CloudConfig()
            .with_unit(Unit(name="b.service"))
            .with_unit(Unit(name="a.service"))
        )
        assert [u.name for u in config.units] == ["b.service", "a.service"]

    def test_units_en_liste_convertie(self):
        """Une liste d'unités est stockée en tuple."""
        config = CloudConfig(units=[Unit(name="a.service")])
        assert isinstance(config.units, tuple)


class TestToYaml:
    """Tests pour la sérialisation."""

    def test_en_tete(self):
        """Le document commence par l'en-tête #cloud-config."""
        text = CloudConfig().with_unit(Unit(name="a.service")).to_yaml()
        assert text.startswith(HEADER + "\n")

    def test_structure(self):
        """Les unités sont sous coreos.units."""
        config = CloudConfig().with_unit(
            Unit(name="50-eth0.network", content=NETWORK_CONTENT)
        )

        data = yaml.safe_load(config.to_yaml())

        assert data == {"coreos": {"units": [
            {"name": "50-eth0.network", "content": NETWORK_CONTENT},
        ]}}

    def test_contenu_en_bloc_litteral(self):
        """Le contenu multi-ligne est écrit en bloc littéral."""
        config = CloudConfig().with_unit(
            Unit(name="50-eth0.network", content=NETWORK_CONTENT)
        )
        assert "content: |" in config.to_yaml()

    def test_drapeaux_seulement_si_vrais(self):
        """runtime et enable ne sont écrits que s'ils sont vrais."""
        config = CloudConfig(units=(
            Unit(name="a.service"),
            Unit(name="b.service", runtime=True, enable=True),
        ))

        units = config.to_dict()["coreos"]["units"]

        assert "runtime" not in units[0]
        assert "enable" not in units[0]
        assert units[1]["runtime"] is True
        assert units[1]["enable"] is True

    def test_str(self):
        """str() retourne le YAML."""
        config = CloudConfig().with_unit(Unit(name="a.service"))
        assert str(config) == config.to_yaml()

    def test_relecture(self):
        """Un document sérialisé se relit à l'identique."""
        config = CloudConfig(units=(
            Unit(name="50-eth0.network", content=NETWORK_CONTENT),
            Unit(name="a.service", content="x", runtime=True, enable=True),
        ))
        assert CloudConfig.from_yaml(config.to_yaml()) == config


class TestFromYaml:
    """Tests pour l'analyse."""

    def test_document_vide(self):
        """Un texte vide donne un document vide."""
        assert CloudConfig.from_yaml("#cloud-config\n").units == ()

    def test_autres_cles_ignorees(self):
        """Les clés autres que coreos.units sont ignorées."""
        config = CloudConfig.from_yaml(
            "hostname: web1\n"
            "coreos:\n"
            "  etcd: {}\n"
            "  units:\n"
            "  - name: a.service\n"
        )
        assert config.units == (Unit(name="a.service"),)

    @pytest.mark.parametrize("text", [
        "coreos: [",
        "- a\n- b\n",
        "coreos: 3\n",
        "coreos:\n  units: a.service\n",
        "coreos:\n  units:\n  - 42\n",
        "coreos:\n  units:\n  - content: x\n",
        "coreos:\n  units:\n  - name: a.service\n    content: 3\n",
        "coreos:\n  units:\n  - name: a.service\n    runtime: 'yes'\n",
        "coreos:\n  units:\n  - name: ../x.service\n",
    ])
    def test_document_invalide(self, text):
        """Les documents mal formés lèvent CloudConfigError."""
        with pytest.raises(CloudConfigError):
            CloudConfig.from_yaml(text)
