"""Backends for ProjectConfig output generation (config.rb)."""

from .ruby_generator import RubyMode, format_value, generate_ruby, save_ruby_file

__all__ = ["RubyMode", "format_value", "generate_ruby", "save_ruby_file"]
