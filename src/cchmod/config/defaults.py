"""Starter .cchmod.toml template."""

DEFAULT_TOML = """\
# cchmod configuration
version = "1.0"

[output]
# format = "sym"          # num | sym — used when neither --num nor --sym is given

[diff]
format = "terminal"       # terminal | json
show_unchanged = true     # list subjects whose bits did not change
"""
