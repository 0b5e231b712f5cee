"""create-loom -- scaffold Pug or HTML projects from bundled templates.

The interactive flow lives in :mod:`create_loom.workflow`, the template
catalogue and the generator in :mod:`create_loom.scaffolder`, and the
command line entry point in :mod:`create_loom.cli`.
"""

__version__ = "0.1.0"
