"""Tests for device models."""

import pytest
from pydantic import ValidationError

from netplan_types.models import (
    AccessPointConfig,
    AccessPointMode,
    BondConfig,
    BondMode,
    BridgeConfig,
    DhcpOverrides,
    EthernetConfig,
    MatchConfig,
    ModemConfig,
    PreferredLifetime,
    Renderer,
    RouteType,
    RoutingConfig,
    RoutingPolicy,
    TransmitHashPolicy,
    TunnelConfig,
    TunnelMode,
    VlanConfig,
    VrfConfig,
    WakeOnWlan,
    WifiConfig,
    WirelessBand,
)


class TestEthernetConfig:
    """Test EthernetConfig model."""

    def test_empty_ethernet(self):
        """Test an ethernet definition without properties."""
        config = EthernetConfig()

        assert config.dhcp4 is None
        assert config.dhcp6 is None
        assert config.match is None
        assert config.to_dict() == {}

    def test_kebab_case_keys(self):
        """Test netplan keys map to python fields."""
        config = EthernetConfig.model_validate({
            "dhcp4": "yes",
            "set-name": "lan0",
            "match": {"macaddress": "00:11:22:33:44:55"},
            "dhcp4-overrides": {"use-dns": "no", "route-metric": 100},
            "receive-checksum-offload": "off",
        })

        assert config.dhcp4 is True
        assert config.set_name == "lan0"
        assert config.match.macaddress == "00:11:22:33:44:55"
        assert config.dhcp4_overrides.use_dns is False
        assert config.dhcp4_overrides.route_metric == 100
        assert config.receive_checksum_offload is False

    def test_python_names_accepted(self):
        """Test models can be built with python field names."""
        config = EthernetConfig(dhcp4=True, set_name="lan0")

        assert config.to_dict() == {"dhcp4": True, "set-name": "lan0"}

    def test_lenient_booleans_everywhere(self):
        """Test boolean fields of every block accept YAML literals."""
        config = EthernetConfig.model_validate({
            "critical": "Y",
            "accept-ra": "off",
            "optional": "on",
            "wakeonlan": "TRUE",
            "delay-virtual-functions-rebind": "n",
            "openvswitch": {"mcast-snooping": "yes", "rstp": "no"},
        })

        assert config.critical is True
        assert config.accept_ra is False
        assert config.optional is True
        assert config.wakeonlan is True
        assert config.delay_virtual_functions_rebind is False
        assert config.openvswitch.mcast_snooping is True
        assert config.openvswitch.rstp is False

    def test_invalid_boolean_literal(self):
        """Test an invalid literal fails validation at its field."""
        with pytest.raises(ValidationError) as exc_info:
            EthernetConfig.model_validate({"dhcp6": "maybe"})

        assert exc_info.value.errors()[0]["loc"] == ("dhcp6",)
        assert "maybe" in str(exc_info.value)

    def test_addresses(self):
        """Test plain and annotated addresses."""
        config = EthernetConfig.model_validate({
            "addresses": [
                "10.0.0.5/24",
                {"10.0.0.6/24": {"lifetime": 0, "label": "maas"}},
            ],
        })

        assert config.addresses[0] == "10.0.0.5/24"
        options = config.addresses[1]["10.0.0.6/24"]
        assert options.lifetime == PreferredLifetime.ZERO
        assert options.label == "maas"

    def test_invalid_renderer(self):
        """Test validation of renderer."""
        with pytest.raises(ValidationError) as exc_info:
            EthernetConfig(renderer="systemd")

        assert "renderer" in str(exc_info.value)

    def test_frozen(self):
        """Test models are immutable."""
        config = EthernetConfig(dhcp4=True)

        with pytest.raises(ValidationError):
            config.dhcp4 = False

        assert config.model_copy(update={"dhcp4": False}).dhcp4 is False

    def test_structural_equality(self):
        """Test equal content gives equal models."""
        assert EthernetConfig(dhcp4="yes") == EthernetConfig(dhcp4=True)
        assert EthernetConfig(dhcp4=True) != EthernetConfig(dhcp4=False)

    def test_unknown_keys_kept(self):
        """Test keys not modelled survive a round trip."""
        config = EthernetConfig.model_validate({"dhcp4": True, "neigh-suppress": True})

        assert config.to_dict() == {"dhcp4": True, "neigh-suppress": True}


class TestMatchConfig:
    """Test MatchConfig model."""

    def test_single_driver(self):
        """Test a scalar driver becomes a list."""
        assert MatchConfig(driver="ixgbe").driver == ["ixgbe"]
        assert MatchConfig(driver=["ixgbe", "e1000"]).driver == ["ixgbe", "e1000"]


class TestDhcpOverrides:
    """Test DhcpOverrides model."""

    def test_use_domains(self):
        """Test use-domains takes a boolean or route."""
        assert DhcpOverrides.model_validate({"use-domains": "route"}).use_domains == "route"
        assert DhcpOverrides.model_validate({"use-domains": "Route"}).use_domains == "route"
        assert DhcpOverrides.model_validate({"use-domains": "yes"}).use_domains is True
        assert DhcpOverrides.model_validate({"use-domains": False}).use_domains is False
        assert DhcpOverrides().use_domains is None

    def test_invalid_use_domains(self):
        """Test an invalid use-domains value."""
        with pytest.raises(ValidationError):
            DhcpOverrides.model_validate({"use-domains": "sometimes"})


class TestRouting:
    """Test routing models."""

    def test_route_from_alias(self):
        """Test the from key, which is a python keyword."""
        route = RoutingConfig.model_validate({
            "from": "192.168.1.10",
            "to": "default",
            "via": "192.168.1.1",
            "on-link": "true",
            "type": "unicast",
        })

        assert route.from_ == "192.168.1.10"
        assert route.on_link is True
        assert route.type == RouteType.UNICAST
        assert route.to_dict()["from"] == "192.168.1.10"

    def test_policy_requires_table(self):
        """Test routing policy requires a table."""
        with pytest.raises(ValidationError) as exc_info:
            RoutingPolicy.model_validate({"from": "10.0.0.0/8"})

        assert "table" in str(exc_info.value)


class TestWifiConfig:
    """Test WifiConfig model."""

    def test_access_points(self):
        """Test access points keyed by SSID."""
        config = WifiConfig.model_validate({
            "dhcp4": "yes",
            "access-points": {
                "home": {"password": "secret", "band": "5GHz", "hidden": "Yes"},
                "cafe": {"mode": "adhoc"},
            },
            "wakeonwlan": ["magic_pkt", "disconnect"],
        })

        home = config.access_points["home"]
        assert home.band == WirelessBand.GHZ_5
        assert home.hidden is True
        assert config.access_points["cafe"].mode == AccessPointMode.ADHOC
        assert config.wakeonwlan == [WakeOnWlan.MAGIC_PKT, WakeOnWlan.DISCONNECT]

    def test_invalid_band(self):
        """Test validation of band."""
        with pytest.raises(ValidationError):
            AccessPointConfig(band="6GHz")


class TestVirtualDevices:
    """Test bond, bridge, vlan, vrf and tunnel models."""

    def test_bond(self):
        """Test bond parameters."""
        config = BondConfig.model_validate({
            "interfaces": ["eth0", "eth1"],
            "parameters": {
                "mode": "802.3ad",
                "transmit-hash-policy": "layer3+4",
                "mii-monitor-interval": 100,
                "all-slaves-active": "off",
            },
        })

        assert config.parameters.mode == BondMode.IEEE8023AD
        assert config.parameters.transmit_hash_policy == TransmitHashPolicy.LAYER3_4
        assert config.parameters.mii_monitor_interval == 100
        assert config.parameters.all_slaves_active is False

    def test_bridge(self):
        """Test bridge parameters."""
        config = BridgeConfig.model_validate({
            "interfaces": ["eth0"],
            "parameters": {"stp": "off", "forward-delay": 4, "port-priority": {"eth0": 10}},
        })

        assert config.parameters.stp is False
        assert config.parameters.forward_delay == 4
        assert config.parameters.port_priority == {"eth0": 10}

    def test_vlan(self):
        """Test vlan definition."""
        config = VlanConfig.model_validate({"id": 100, "link": "eth0", "renderer": "sriov"})

        assert config.id == 100
        assert config.renderer == Renderer.SRIOV

        with pytest.raises(ValidationError):
            VlanConfig(id=5000)

    def test_vrf_requires_table(self):
        """Test vrf requires a table."""
        assert VrfConfig(table=1000, interfaces=["br0"]).table == 1000

        with pytest.raises(ValidationError):
            VrfConfig(interfaces=["br0"])

    def test_wireguard_tunnel(self):
        """Test a wireguard tunnel."""
        config = TunnelConfig.model_validate({
            "mode": "wireguard",
            "port": 51820,
            "keys": {"private": "/etc/wireguard/private.key"},
            "peers": [{
                "endpoint": "1.2.3.4:51820",
                "allowed-ips": ["0.0.0.0/0"],
                "keys": {"public": "abc="},
            }],
        })

        assert config.mode == TunnelMode.WIREGUARD
        assert config.keys.private == "/etc/wireguard/private.key"
        assert config.peers[0].allowed_ips == ["0.0.0.0/0"]
        assert config.peers[0].keys.public == "abc="


class TestModemConfig:
    """Test ModemConfig model."""

    def test_modem(self):
        """Test modem definition."""
        config = ModemConfig.model_validate({"apn": "internet", "auto-config": "y", "pin": "1234"})

        assert config.apn == "internet"
        assert config.auto_config is True
        assert config.pin == "1234"
