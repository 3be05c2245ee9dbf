"""
Dialog Framework

Branching conversations built on the dialog engine.

Modules:
- dialog: Document loading, conversation graphs, traversal
- components: Presentation and host collaborators
"""

__version__ = "0.1.0"
