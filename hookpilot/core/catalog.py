"""
HOOKPILOT - Template Catalog Loader
Carrega e valida o catálogo de templates compatíveis por tipo de hook.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..config import TEMPLATE_CATALOG_FILE
from .models import HookPilotError, TemplateCatalog


# =============================================================================
# Exceções Customizadas
# =============================================================================

class CatalogLoadError(HookPilotError):
    """Erro ao carregar o catálogo de templates."""
    pass


# =============================================================================
# Loader Principal
# =============================================================================

class CatalogLoader:
    """
    Carrega o catálogo JSON e converte para TemplateCatalog.

    Responsabilidades:
    - Ler arquivo JSON
    - Validar estrutura (objeto de listas de strings)
    - Rejeitar templates duplicados dentro de um mesmo hook
    """

    def load_from_file(self, filepath: Union[str, Path]) -> TemplateCatalog:
        """
        Carrega o catálogo de um arquivo JSON.

        Raises:
            CatalogLoadError: Se não conseguir ler ou validar o arquivo
        """
        filepath = Path(filepath)

        if not filepath.is_file():
            raise CatalogLoadError(f"Catálogo de templates não encontrado: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Erro ao parsear JSON do catálogo: {e}")
        except OSError as e:
            raise CatalogLoadError(f"Erro ao ler catálogo: {e}")

        return self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> TemplateCatalog:
        """Valida o dicionário já parseado e monta o catálogo imutável."""
        if not isinstance(data, dict) or not data:
            raise CatalogLoadError("Catálogo deve ser um objeto não-vazio")

        entries = []
        for hook_type, templates in data.items():
            entries.append((hook_type, tuple(self._load_templates(hook_type, templates))))

        return TemplateCatalog(entries=tuple(entries))

    def _load_templates(self, hook_type: str, templates: Any) -> List[str]:
        if not isinstance(templates, list) or not templates:
            raise CatalogLoadError(f"Hook '{hook_type}': templates devem ser uma lista não-vazia")

        seen = set()
        for template_id in templates:
            if not isinstance(template_id, str) or not template_id:
                raise CatalogLoadError(f"Hook '{hook_type}': template inválido: {template_id!r}")
            if template_id in seen:
                raise CatalogLoadError(f"Hook '{hook_type}': template duplicado: {template_id}")
            seen.add(template_id)

        return templates


# =============================================================================
# Helper Functions
# =============================================================================

def load_template_catalog(filepath: Optional[Union[str, Path]] = None) -> TemplateCatalog:
    """
    Carrega o catálogo de templates (padrão: config/hook_templates.json).

    Deve ser chamado uma vez na inicialização e o resultado repassado
    explicitamente para quem precisar.
    """
    return CatalogLoader().load_from_file(filepath or TEMPLATE_CATALOG_FILE)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    'CatalogLoader',
    'CatalogLoadError',
    'load_template_catalog',
]
