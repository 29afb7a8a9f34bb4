"""
HOOKPILOT - Command Runner
Execução síncrona de comandos externos (git, npm, npx).
"""

import subprocess
from pathlib import Path
from typing import List

from ..core.models import HookPilotError


class CommandError(HookPilotError):
    """Comando externo falhou ou não foi encontrado."""

    def __init__(self, cmd: List[str], message: str, returncode: int = 1):
        self.cmd = cmd
        self.returncode = returncode
        super().__init__(message)


class CommandRunner:
    """Executa comandos no diretório do projeto e bloqueia até o fim."""

    def __init__(self, cwd: Path):
        self.cwd = Path(cwd)

    def run(self, cmd: List[str]) -> str:
        """
        Executa comando e retorna stdout.

        Raises:
            CommandError: Se o executável não existir ou o exit code for != 0
        """
        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            raise CommandError(cmd, f"Comando não encontrado no PATH: {cmd[0]}", returncode=127)

        if result.returncode != 0:
            raise CommandError(
                cmd,
                f"Comando falhou: {' '.join(cmd)}\n"
                f"Stderr: {result.stderr.strip()}",
                returncode=result.returncode,
            )

        return result.stdout


__all__ = [
    "CommandRunner",
    "CommandError",
]
