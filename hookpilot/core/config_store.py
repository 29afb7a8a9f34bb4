"""
HOOKPILOT - Configuration Store
Único ponto de leitura e escrita do hooks-config.json.
"""

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ..config import CONFIG_FILE_NAME
from .models import ConfigError, HooksConfig


class ConfigStore:
    """
    Dono do arquivo de configuração do projeto.

    Todo componente lê com `load()` e grava com `save()`; nenhum outro
    código escreve no arquivo.
    """

    def __init__(self, project_root: Path, filename: str = CONFIG_FILE_NAME):
        """
        Args:
            project_root: Raiz do projeto (onde fica hooks-config.json)
            filename: Nome do arquivo de configuração
        """
        self.project_root = Path(project_root)
        self.path = self.project_root / filename

    def exists(self) -> bool:
        return self.path.is_file()

    def read_raw(self) -> Any:
        """
        Lê o JSON sem validar a estrutura.

        Raises:
            ConfigError: Se o arquivo não existir ou não for JSON válido
        """
        if not self.exists():
            raise ConfigError(f"Arquivo de configuração não encontrado: {self.path}")

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{self.path.name} corrompido: {e}")

    def load(self) -> HooksConfig:
        """
        Carrega e valida o registro.

        Raises:
            ConfigError: Se o arquivo estiver ausente, corrompido ou inválido
        """
        return HooksConfig.from_dict(self.read_raw())

    def save(self, record: HooksConfig):
        """
        Grava o registro completo (indentação de 2 espaços).

        A escrita passa por um arquivo temporário no mesmo diretório seguido de
        `os.replace`, então o arquivo nunca fica pela metade.
        """
        payload = json.dumps(record.to_dict(), indent=2, ensure_ascii=False) + "\n"

        self.project_root.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            dir=self.project_root,
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
            # mkstemp cria 0600; o arquivo final mantém o modo anterior ou o do umask
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def _file_mode(self) -> int:
        if self.exists():
            return stat.S_IMODE(self.path.stat().st_mode)

        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def delete(self) -> bool:
        """Remove o arquivo de configuração. Retorna False se já não existia."""
        if not self.exists():
            return False
        self.path.unlink()
        return True

    @staticmethod
    def add_hook(record: HooksConfig, hook_type: str, params: Dict[str, Any]) -> bool:
        """
        Registra um hook.

        O nome só entra em `hooks` uma vez; os parâmetros são sempre
        atualizados para refletir o último template gravado em disco.

        Returns:
            True se o hook foi adicionado à lista, False se já existia
        """
        added = hook_type not in record.hooks
        if added:
            record.hooks.append(hook_type)
        record.config[hook_type] = dict(params)
        return added

    @staticmethod
    def remove_hooks(record: HooksConfig, hook_types: Iterable[str]) -> List[str]:
        """
        Remove hooks de `hooks` e `config` numa única passada.

        Nomes ausentes são ignorados.

        Returns:
            Hooks efetivamente removidos
        """
        to_remove = set(hook_types)
        removed = [hook for hook in record.hooks if hook in to_remove]

        record.hooks = [hook for hook in record.hooks if hook not in to_remove]
        record.config = {
            hook: params
            for hook, params in record.config.items()
            if hook not in to_remove
        }
        return removed


__all__ = [
    'ConfigStore',
]
