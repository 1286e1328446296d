"""DateTimeFormatter Example - Locales, Fallback and Presets.

Demonstrates registering locale messages and how formatters fall back when
a locale is not registered.

Scenarios covered:
1. Standard presets with CLDR English names
2. Latvian and German names from CLDR, English fallback
3. Hand-written messages for an application-specific locale
4. Patterns that need no locale at all

Python 3.13+.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from chronopattern import (
    DateTimeFormatter,
    LocaleNotRegisteredError,
    LocaleRegistry,
    StandardPattern,
    compile_pattern,
)

RIGA = timezone(timedelta(hours=2))
SAMPLE = datetime(2018, 11, 17, 21, 4, 9, tzinfo=RIGA)


def example_1_presets(registry: LocaleRegistry) -> None:
    """Example 1: Every StandardPattern preset in English."""
    print("=" * 60)
    print("Example 1: Standard presets (en)")
    print("=" * 60)

    for preset in StandardPattern:
        formatter = DateTimeFormatter(preset, registry=registry)
        print(f"{preset.name:<22} {formatter.format(SAMPLE)}")


def example_2_fallback(registry: LocaleRegistry) -> None:
    """Example 2: Registered locales and fallback to English."""
    print("\n" + "=" * 60)
    print("Example 2: Fallback (lv, de registered; fr is not)")
    print("=" * 60)

    registry.register_cldr("lv")
    registry.register_cldr("de")

    formatter = DateTimeFormatter("EEEE, d. MMMM yyyy", registry=registry)
    for locale in ("lv", "de", "fr"):
        chosen = registry.verified_locale(locale)
        print(f"{locale} -> {chosen}: {formatter.format(SAMPLE, locale)}")


def example_3_custom_messages(registry: LocaleRegistry) -> None:
    """Example 3: Hand-written messages for an in-house locale."""
    print("\n" + "=" * 60)
    print("Example 3: Custom messages")
    print("=" * 60)

    pirate = dict(registry.resolve("en"))
    pirate["months.full.11"] = "Blustermonth"
    registry.register("en-x-pirate", pirate)

    formatter = DateTimeFormatter("d MMMM 'of the year' yyyy", "en-x-pirate", registry=registry)
    print(formatter.format(SAMPLE))


def example_4_locale_free() -> None:
    """Example 4: Numeric patterns render without any registered locale."""
    print("\n" + "=" * 60)
    print("Example 4: Locale-free patterns")
    print("=" * 60)

    empty = LocaleRegistry()
    for pattern in ("yyyy-MM-dd'T'HH:mm:ssXXX", "YYYY-'W'ww-u", "D"):
        compiled = compile_pattern(pattern)
        formatter = DateTimeFormatter(pattern, registry=empty)
        print(f"{pattern:<26} {formatter.format(SAMPLE)}  "
              f"(locale dependent: {compiled.is_locale_dependent})")

    try:
        DateTimeFormatter("MMMM", registry=empty).format(SAMPLE)
    except LocaleNotRegisteredError as e:
        print(f"\nMMMM without locales:\n{e}")


# Main execution
if __name__ == "__main__":
    shared = LocaleRegistry(default_locale="en")
    shared.register_cldr("en")

    example_1_presets(shared)
    example_2_fallback(shared)
    example_3_custom_messages(shared)
    example_4_locale_free()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
