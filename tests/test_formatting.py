from datetime import datetime

import pytest

from statusbar import formatting
from statusbar.models.battery import BatteryInfo
from statusbar.models.memory import MemInfo
from statusbar.models.network import NetworkSample
from statusbar.services.volume_monitor import MUTED


def battery(status, capacity):
    return BatteryInfo(status=status, capacity=capacity, energy_full=100, energy_now=50)


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0B"),
        (500, "500B"),
        (1024, "1K"),
        (1536, "1.5K"),
        (15000, "14.6K"),
        (5 * 1024 + 123, "5.12K"),
        (1048576, "1M"),
        (1073741824, "1G"),
        (250 * 1024**3, "250G"),
    ],
)
def test_format_bytes(size, expected):
    assert formatting.format_bytes(size) == expected


def test_format_bytes_stops_at_terabytes():
    assert formatting.format_bytes(2048 * 1024**4) == "2048T"


def test_format_rate_appends_per_second():
    assert formatting.format_rate(1536) == "1.5K/s"


def test_round_half_up_differs_from_bankers_rounding():
    assert formatting.round_half_up(2.5) == 3
    assert formatting.round_half_up(9.5) == 10
    assert formatting.round_half_up(9.49) == 9


def test_percentage_with_zero_denominator_is_zero():
    assert formatting.percentage(0, 0) == 0
    assert formatting.percentage(5, 0) == 0


def test_percentage_rounds_half_up():
    assert formatting.percentage(1, 8) == 13  # 12.5
    assert formatting.percentage(1, 3) == 33


def test_full_status_overrides_capacity_bucket():
    assert formatting.battery_icon(battery("Full", 95)) == formatting.FULL_ICON
    assert formatting.battery_icon(battery("Full", 3)) == formatting.FULL_ICON


def test_discharging_icon_uses_rounded_bucket():
    assert formatting.battery_icon(battery("Discharging", 95)) == formatting.BATTERY_ICONS[10]
    assert formatting.battery_icon(battery("Discharging", 44)) == formatting.BATTERY_ICONS[4]
    assert formatting.battery_icon(battery("Discharging", 0)) == formatting.BATTERY_ICONS[0]


def test_charging_icon_set_is_used_while_charging():
    assert formatting.battery_icon(battery("Charging", 57)) == formatting.CHARGING_ICONS[6]


def test_capacity_above_hundred_uses_last_bucket():
    assert formatting.battery_icon(battery("Discharging", 104)) == formatting.BATTERY_ICONS[10]


def test_format_battery_segment():
    assert formatting.format_battery(battery("Discharging", 57)) == (
        f"{formatting.BATTERY_ICONS[6]} 57%"
    )


@pytest.mark.parametrize("level", [MUTED, 0.0])
def test_non_positive_volume_renders_muted(level):
    assert formatting.format_volume(level) == f"{formatting.MUTED_ICON} MUTED"


def test_volume_renders_floored_percent():
    assert formatting.format_volume(0.55) == f"{formatting.VOLUME_ICON} 55%"
    assert formatting.format_volume(1.0) == f"{formatting.VOLUME_ICON} 100%"


def test_memory_percentage_uses_available_memory():
    meminfo = MemInfo(fields={"MemTotal": 16000000, "MemAvailable": 4000000})

    assert formatting.memory_percentage(meminfo) == 75
    assert formatting.format_memory(meminfo) == f"{formatting.MEMORY_ICON} 75%"


def test_memory_percentage_with_zero_total_is_zero():
    meminfo = MemInfo(fields={"MemTotal": 0, "MemAvailable": 0})
    assert formatting.memory_percentage(meminfo) == 0


def test_format_network_segment():
    sample = NetworkSample(tx_bytes=1536, rx_bytes=1073741824, tx_rate=500, rx_rate=1048576)

    assert formatting.format_network(sample) == (
        f"{formatting.UPLOAD_ICON} 500B/s (1.5K) {formatting.DOWNLOAD_ICON} 1M/s (1G)"
    )


def test_format_time_uses_given_moment():
    moment = datetime(2026, 10, 19, 13, 5, 9)
    assert formatting.format_time(moment) == moment.strftime("%X")
