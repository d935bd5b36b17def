"""Bond device models."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import Field

from netplan_types.models.base import NetplanModel
from netplan_types.models.common import CommonProperties
from netplan_types.yaml_bool import OptionalLenientBool


class BondMode(str, Enum):
    """Bonding mode."""
    BALANCE_RR = "balance-rr"
    ACTIVE_BACKUP = "active-backup"
    BALANCE_XOR = "balance-xor"
    BROADCAST = "broadcast"
    IEEE8023AD = "802.3ad"
    BALANCE_TLB = "balance-tlb"
    BALANCE_ALB = "balance-alb"


class LacpRate(str, Enum):
    """Rate of LACPDU transmission."""
    SLOW = "slow"
    FAST = "fast"


class TransmitHashPolicy(str, Enum):
    """Transmit hash policy for slave selection."""
    LAYER2 = "layer2"
    LAYER2_3 = "layer2+3"
    LAYER3_4 = "layer3+4"
    ENCAP2_3 = "encap2+3"
    ENCAP3_4 = "encap3+4"


class AdSelect(str, Enum):
    """Aggregation selection mode for 802.3ad."""
    STABLE = "stable"
    BANDWIDTH = "bandwidth"
    COUNT = "count"


class ArpValidate(str, Enum):
    """Whether ARP probes and replies are validated."""
    NONE = "none"
    ACTIVE = "active"
    BACKUP = "backup"
    ALL = "all"


class ArpAllTargets(str, Enum):
    """Which ARP targets must be up for a slave to be up."""
    ANY = "any"
    ALL = "all"


class FailOverMacPolicy(str, Enum):
    """MAC address handling on failover."""
    NONE = "none"
    ACTIVE = "active"
    FOLLOW = "follow"


class PrimaryReselectPolicy(str, Enum):
    """When the primary slave is made active again."""
    ALWAYS = "always"
    BETTER = "better"
    FAILURE = "failure"


# Intervals are plain milliseconds or a value with a unit suffix
Interval = Union[int, str]


class BondParameters(NetplanModel):
    """Bonding parameters."""
    mode: Optional[BondMode] = Field(None, description="Defaults to balance-rr")
    lacp_rate: Optional[LacpRate] = None
    mii_monitor_interval: Optional[Interval] = None
    min_links: Optional[int] = Field(None, ge=0)
    transmit_hash_policy: Optional[TransmitHashPolicy] = None
    ad_select: Optional[AdSelect] = None
    all_slaves_active: OptionalLenientBool = None
    arp_interval: Optional[Interval] = None
    arp_ip_targets: Optional[List[str]] = None
    arp_validate: Optional[ArpValidate] = None
    arp_all_targets: Optional[ArpAllTargets] = None
    up_delay: Optional[Interval] = None
    down_delay: Optional[Interval] = None
    fail_over_mac_policy: Optional[FailOverMacPolicy] = None
    gratuitous_arp: Optional[int] = Field(None, ge=1, le=255)
    packets_per_slave: Optional[int] = Field(None, ge=0)
    primary_reselect_policy: Optional[PrimaryReselectPolicy] = None
    resend_igmp: Optional[int] = Field(None, ge=0, le=255)
    learn_packet_interval: Optional[Interval] = None
    primary: Optional[str] = None


class BondConfig(CommonProperties):
    """Bond device definition."""
    interfaces: Optional[List[str]] = None
    parameters: Optional[BondParameters] = None
