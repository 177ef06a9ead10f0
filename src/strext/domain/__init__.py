"""Domain layer — pure string utilities.

This layer depends only on stdlib, regex, pypinyin, and Pillow.
It must never import from services, commands, config, or output.
"""
