from cpufacts.builders.macos import build_macos_report, parse_product_version
from cpufacts.core.records import OSType


def test_intel_fixture(macos_blobs):
    info = build_macos_report(*macos_blobs)
    assert info.name == "Intel(R) Core(TM) i7-9750H CPU @ 2.60GHz"
    assert info.clock_mhz == 2600
    assert info.clock == "2600 MHz"
    assert info.cache == 256 * 1024
    assert info.num_sockets == 1
    assert info.cores_per_socket == 6
    assert info.total_cores == 6
    assert info.total_memory_bytes == 17179869184
    assert info.free_memory_bytes == 0
    assert info.os_type is OSType.MACOSX
    assert info.os_version == "13.6.1"


def test_clock_from_cpufrequency_max():
    info = build_macos_report([], ["hw.cpufrequency_max: 3200000000"], [])
    assert info.clock_mhz == 3200


def test_falls_back_to_cpufrequency():
    info = build_macos_report([], ["hw.cpufrequency: 2400000000"], [])
    assert info.clock_mhz == 2400


def test_apple_silicon_without_frequency_or_cache():
    machdep = ["machdep.cpu.brand_string: Apple M2", "machdep.cpu.core_count: 8"]
    info = build_macos_report(machdep, ["hw.memsize: 17179869184"], ["ProductVersion: 14.2"])
    assert info.name == "Apple M2"
    assert info.clock_mhz == 0.0
    assert info.cache == 0
    assert info.total_cores == 8
    assert info.os_version == "14.2"


def test_product_version():
    assert parse_product_version(["ProductName:\tmacOS", "ProductVersion:\t13.6.1"]) == "13.6.1"
    assert parse_product_version(["ProductName: macOS"]) == ""
