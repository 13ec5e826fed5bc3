"""
Demo: Parse a config.rb, validate it and export it as YAML and annotated Ruby.
"""

import sys

from compass_config.examples import build_foundation_config
from compass_config.rb_parser import parse_config_file
from compass_config.validation import validate_config
from compass_config.paths import http_asset_paths
from compass_config.serialization import config_to_yaml
from compass_config.backends import RubyMode, generate_ruby


def print_report(config, report):
    """Pretty-print a ValidationReport."""
    print()
    print("=" * 70)
    print("COMPASS PROJECT CONFIGURATION")
    print("=" * 70)
    print()

    print("📁 OPTIONS")
    for name, value in config.effective_options().items():
        marker = "" if config.is_set(name) else "  (default)"
        print(f"  {name:<18} {getattr(value, 'value', value)}{marker}")
    if config.requires:
        print(f"  requires           {', '.join(config.requires)}")
    print()

    print("🔗 ASSET URLS")
    for name, url in http_asset_paths(config).items():
        print(f"  {name:<22} {url}")
    print()

    if report.errors:
        print("❌ ERRORS")
        for i, err in enumerate(report.errors, 1):
            print(f"  {i}. {err}")
    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    if report.is_valid and not report.warnings:
        print("✨ NO FINDINGS - Configuration looks clean!")
    print()


if __name__ == "__main__":
    if len(sys.argv) > 1:
        config = parse_config_file(sys.argv[1])
    else:
        config = build_foundation_config()

    report = validate_config(config)
    print_report(config, report)

    print(generate_ruby(config, mode=RubyMode.ANNOTATED))

    with open("config_output.yaml", "w") as f:
        f.write(config_to_yaml(config))
    print(f"✅ Configuration exported to config_output.yaml")
