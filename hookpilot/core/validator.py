"""
HOOKPILOT - Template Validator
Confere se um template customizado é um shell script utilizável.
"""

from enum import Enum
from pathlib import Path
from typing import Tuple, Union

from .output import print_error, print_success


VALID_EXTENSION = ".sh"
SHEBANG = b"#!"


class TemplateCheck(str, Enum):
    """Resultado da validação de um template."""
    VALID = "valid"
    NOT_FOUND = "not_found"
    INVALID_EXTENSION = "invalid_extension"
    MISSING_SHEBANG = "missing_shebang"
    UNREADABLE = "unreadable"


def check_template(template_path: Union[str, Path]) -> Tuple[TemplateCheck, str]:
    """
    Classifica um template sem imprimir nada.

    Returns:
        (resultado, mensagem legível)
    """
    path = Path(template_path)

    if not path.is_file():
        return TemplateCheck.NOT_FOUND, f"Arquivo de template não encontrado: {template_path}"

    # Shell scripts com .sh ou sem extensão
    ext = path.suffix
    if ext and ext != VALID_EXTENSION:
        return (
            TemplateCheck.INVALID_EXTENSION,
            f"Formato de arquivo inválido: {ext}. Formatos suportados: .sh, sem extensão",
        )

    try:
        with open(path, 'rb') as f:
            head = f.read(len(SHEBANG))
    except OSError as e:
        return TemplateCheck.UNREADABLE, f"Erro ao ler template {template_path}: {e}"

    if head != SHEBANG:
        return (
            TemplateCheck.MISSING_SHEBANG,
            "Shell script inválido: shebang ausente (ex: #!/bin/sh) no topo do arquivo.",
        )

    return TemplateCheck.VALID, "Template customizado validado"


def validate_template(template_path: Union[str, Path]) -> bool:
    """
    Valida um template customizado e imprime o diagnóstico.

    Args:
        template_path: Caminho do arquivo candidato

    Returns:
        True somente se o arquivo existe, tem extensão aceita e começa com shebang
    """
    result, message = check_template(template_path)

    if result is TemplateCheck.VALID:
        print_success(message)
        return True

    print_error(message)
    return False


__all__ = [
    "TemplateCheck",
    "check_template",
    "validate_template",
    "VALID_EXTENSION",
]
