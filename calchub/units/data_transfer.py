"""Data transfer rate. Base: bit per second."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

BITS_PER_BYTE = 8
K, M, G, T = 1e3, 1e6, 1e9, 1e12
KI, MI, GI, TI = 1024, 1024 ** 2, 1024 ** 3, 1024 ** 4

DATA_TRANSFER = Registry("data transfer rate", base="bps", units=[
    # SI bits
    Unit("bps", "bit per second (bit/s)", 1),
    Unit("Kbps", "kilobit per second (kb/s)", K),
    Unit("Mbps", "megabit per second (Mb/s)", M),
    Unit("Gbps", "gigabit per second (Gb/s)", G),
    Unit("Tbps", "terabit per second (Tb/s)", T),
    # SI bytes
    Unit("B/s", "byte per second (B/s)", BITS_PER_BYTE),
    Unit("KB/s", "kilobyte per second (kB/s)", BITS_PER_BYTE * K),
    Unit("MB/s", "megabyte per second (MB/s)", BITS_PER_BYTE * M),
    Unit("GB/s", "gigabyte per second (GB/s)", BITS_PER_BYTE * G),
    Unit("TB/s", "terabyte per second (TB/s)", BITS_PER_BYTE * T),
    # Binary bits
    Unit("Kibps", "kibibit per second (Kib/s)", KI),
    Unit("Mibps", "mebibit per second (Mib/s)", MI),
    Unit("Gibps", "gibibit per second (Gib/s)", GI),
    Unit("Tibps", "tebibit per second (Tib/s)", TI),
    # Binary bytes
    Unit("KiB/s", "kibibyte per second (KiB/s)", BITS_PER_BYTE * KI),
    Unit("MiB/s", "mebibyte per second (MiB/s)", BITS_PER_BYTE * MI),
    Unit("GiB/s", "gibibyte per second (GiB/s)", BITS_PER_BYTE * GI),
    Unit("TiB/s", "tebibyte per second (TiB/s)", BITS_PER_BYTE * TI),
])

PAGE = ConverterPage(
    slug="data-transfer",
    title="Data Transfer Rate Converter",
    registry=DATA_TRANSFER,
    default_from="MB/s",
    default_to="Mbps",
    default_value="100",
    default_favorites=("Mbps", "MB/s", "Gbps", "GiB/s", "Kbps", "KiB/s"),
    namespace="datarate",
    hints=(
        ("B/s", "1 byte = 8 bits: 1 MB/s = 8 Mbps."),
        ("i", "Kibi/Mebi/Gibi units are powers of 1024."),
    ),
)
