"""
🪝 HOOKPILOT - Git hooks sob controle

Ferramenta que instala, configura e remove git hooks (nativos, Husky ou
Lefthook) a partir de um catálogo fixo de templates, mantendo o estado em
hooks-config.json.
"""

from .__version__ import __version__

__all__ = ["__version__"]
