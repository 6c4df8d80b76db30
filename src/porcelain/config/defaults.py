"""Starter .porcelain.toml template."""

DEFAULT_TOML = """\
# porcelain configuration
version = "1.0"

[status]
untracked = "all"         # all | normal | no — passed to git --untracked-files
timeout = 30              # seconds before a stuck git process is killed

[output]
format = "terminal"       # terminal | json | yaml
show_summary = true
show_full_paths = false
"""
