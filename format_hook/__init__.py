"""
FORMAT HOOK - Git pre-commit formatting gate

Instala-se como hook pre-commit do git, verifica se o conteúdo staged está
formatado de acordo com o estilo do projeto e deixa o desenvolvedor aplicar
a correção, forçar o commit ou cancelá-lo.
"""

from .__version__ import __version__

__all__ = ["__version__"]
