"""
Example project configuration for proof-of-concept.

Builds the Foundation site configuration: the zurb-foundation plugin,
a Jekyll-style _site/ deploy root and _source/assets directories,
with every optional toggle left at the compiler default.
"""
from compass_config.model import ProjectConfig


def build_foundation_config(asset_root: str = "_source/assets") -> ProjectConfig:
    config = ProjectConfig(
        http_path="_site/",
        css_dir=f"{asset_root}/stylesheets",
        sass_dir=f"{asset_root}/sass",
        images_dir=f"{asset_root}/images",
        javascripts_dir=f"{asset_root}/javascript",
    )
    config.requires = ["zurb-foundation"]
    return config
