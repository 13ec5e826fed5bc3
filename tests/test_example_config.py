from compass_config.examples import build_foundation_config
from compass_config.validation import validate_config


def test_build_foundation_config():
    config = build_foundation_config()
    assert config.requires == ["zurb-foundation"]
    assert config.http_path == "_site/"
    assert config.css_dir == "_source/assets/stylesheets"
    assert config.javascripts_dir == "_source/assets/javascript"
    # Toggles left for the compiler to decide
    assert config.output_style is None
    assert config.preferred_syntax is None

    report = validate_config(config)
    assert report.is_valid


def test_custom_asset_root():
    config = build_foundation_config(asset_root="assets")
    assert config.sass_dir == "assets/sass"
    assert config.images_dir == "assets/images"
