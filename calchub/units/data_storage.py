"""Digital storage. Base: byte."""

from ..services.converter_page import ConverterPage
from ..services.unit_registry import Registry, Unit

BITS_PER_BYTE = 8
KIB = 1024

DATA_STORAGE = Registry("data storage", base="B", units=[
    # Bits (SI)
    Unit("b", "bit (b)", 1 / BITS_PER_BYTE),
    Unit("kb", "kilobit (kb, 10³)", 1e3 / BITS_PER_BYTE),
    Unit("Mb", "megabit (Mb, 10⁶)", 1e6 / BITS_PER_BYTE),
    Unit("Gb", "gigabit (Gb, 10⁹)", 1e9 / BITS_PER_BYTE),
    Unit("Tb", "terabit (Tb, 10¹²)", 1e12 / BITS_PER_BYTE),
    Unit("Pb", "petabit (Pb, 10¹⁵)", 1e15 / BITS_PER_BYTE),
    # Bits (IEC)
    Unit("Kib", "kibibit (Kib, 2¹⁰)", KIB / BITS_PER_BYTE),
    Unit("Mib", "mebibit (Mib, 2²⁰)", KIB ** 2 / BITS_PER_BYTE),
    Unit("Gib", "gibibit (Gib, 2³⁰)", KIB ** 3 / BITS_PER_BYTE),
    Unit("Tib", "tebibit (Tib, 2⁴⁰)", KIB ** 4 / BITS_PER_BYTE),
    Unit("Pib", "pebibit (Pib, 2⁵⁰)", KIB ** 5 / BITS_PER_BYTE),
    # Bytes
    Unit("B", "Byte (B)", 1),
    Unit("kB", "Kilobyte (kB, 10³)", 1e3),
    Unit("MB", "Megabyte (MB, 10⁶)", 1e6),
    Unit("GB", "Gigabyte (GB, 10⁹)", 1e9),
    Unit("TB", "Terabyte (TB, 10¹²)", 1e12),
    Unit("PB", "Petabyte (PB, 10¹⁵)", 1e15),
    # Bytes (IEC)
    Unit("KiB", "Kibibyte (KiB, 2¹⁰)", KIB),
    Unit("MiB", "Mebibyte (MiB, 2²⁰)", KIB ** 2),
    Unit("GiB", "Gibibyte (GiB, 2³⁰)", KIB ** 3),
    Unit("TiB", "Tebibyte (TiB, 2⁴⁰)", KIB ** 4),
    Unit("PiB", "Pebibyte (PiB, 2⁵⁰)", KIB ** 5),
])

PAGE = ConverterPage(
    slug="data-storage",
    title="Data Storage Converter",
    registry=DATA_STORAGE,
    default_from="GB",
    default_to="GiB",
    default_favorites=("MB", "GB", "TB", "MiB", "GiB", "TiB", "Mb", "Gb"),
    namespace="datastorage",
    hints=(
        ("i", "IEC units (KiB, MiB, ...) are powers of 1024; SI units (kB, MB, ...) are powers of 1000."),
    ),
)
