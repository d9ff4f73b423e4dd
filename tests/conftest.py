import pytest

from statusbar.config import Settings, get_settings

PROC_STAT = """\
cpu  100 0 50 800 50 0 0 0 0 0
cpu0 50 0 25 400 25 0 0 0 0 0
intr 12345
ctxt 67890
"""

MEMINFO = """\
MemTotal:       16000000 kB
MemFree:         2000000 kB
MemAvailable:    4000000 kB
HugePages_Total:       0
"""


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def host_tree(tmp_path):
    """A fake /proc and /sys tree without battery or network interface."""
    proc = tmp_path / "proc"
    proc.mkdir()
    (proc / "stat").write_text(PROC_STAT)
    (proc / "meminfo").write_text(MEMINFO)
    (tmp_path / "power_supply").mkdir()
    (tmp_path / "net").mkdir()
    return tmp_path


@pytest.fixture
def settings(host_tree):
    return Settings(
        proc_stat_path=str(host_tree / "proc" / "stat"),
        meminfo_path=str(host_tree / "proc" / "meminfo"),
        power_supply_dir=str(host_tree / "power_supply"),
        net_class_dir=str(host_tree / "net"),
        net_interface="wlan0",
        battery_device="BAT0",
        volume_command=["wpctl", "get-volume", "@DEFAULT_AUDIO_SINK@"],
    )


@pytest.fixture
def add_battery(host_tree):
    def _add(status="Discharging\n", capacity="57\n"):
        device = host_tree / "power_supply" / "BAT0"
        device.mkdir()
        (device / "status").write_text(status)
        (device / "capacity").write_text(capacity)
        (device / "energy_full").write_text("50000000\n")
        (device / "energy_now").write_text("28500000\n")
        return device

    return _add


@pytest.fixture
def add_interface(host_tree):
    def _add(tx_bytes=1024, rx_bytes=2048, name="wlan0"):
        statistics = host_tree / "net" / name / "statistics"
        statistics.mkdir(parents=True)
        (statistics / "tx_bytes").write_text(f"{tx_bytes}\n")
        (statistics / "rx_bytes").write_text(f"{rx_bytes}\n")
        return statistics

    return _add
