"""
HOOKPILOT - Template Selector
Escolha de template compatível com o hook e geração do script.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ..core.output import print_error
from ..core.models import GeneratedTemplate, HookPilotError, TemplateCatalog
from ..core.prompts import Prompter
from ..core.validator import validate_template
from .templates import (
    CUSTOM_TEMPLATE,
    TEMPLATE_BODIES,
    TEMPLATE_PARAMS,
    render_template,
    template_label,
)


class TemplateSelectionError(HookPilotError):
    """Template incompatível ou template customizado rejeitado."""
    pass


class TemplateSelector:
    """
    Pergunta qual template usar e gera o conteúdo do hook.

    Só oferece templates que o catálogo lista como compatíveis com o hook.
    """

    MAX_CUSTOM_ATTEMPTS = 3

    def __init__(self, catalog: TemplateCatalog, prompter: Prompter):
        """
        Args:
            catalog: Catálogo carregado na inicialização
            prompter: Interface de perguntas
        """
        self.catalog = catalog
        self.prompter = prompter

    def select_template(self, hook_type: str) -> str:
        """
        Pergunta qual template usar para o hook.

        Raises:
            TemplateSelectionError: Se o hook não tiver templates no catálogo
        """
        templates = self.catalog.templates_for(hook_type)
        if not templates:
            raise TemplateSelectionError(f"Hook desconhecido: {hook_type}")

        return self.prompter.select(
            f"Selecione um template para {hook_type}:",
            templates,
            labels=[template_label(t) for t in templates],
        )

    def generate_content(self, template_id: str, hook_type: str) -> GeneratedTemplate:
        """
        Gera o script do template escolhido.

        Returns:
            GeneratedTemplate com conteúdo e parâmetros a persistir

        Raises:
            TemplateSelectionError: Template incompatível ou custom rejeitado
        """
        if not self.catalog.is_compatible(hook_type, template_id):
            raise TemplateSelectionError(
                f"Template '{template_id}' não é compatível com {hook_type}. "
                f"Compatíveis: {self.catalog.templates_for(hook_type)}"
            )

        if template_id == CUSTOM_TEMPLATE:
            return self._generate_custom(hook_type)

        if template_id not in TEMPLATE_BODIES:
            raise TemplateSelectionError(f"Template sem corpo embutido: {template_id}")

        params: Dict[str, Any] = {"template": template_id}
        for name, (question, default) in TEMPLATE_PARAMS.get(template_id, {}).items():
            params[name] = self.prompter.text(question, default=default)

        content = render_template(template_id, hook_type, params)
        return GeneratedTemplate(template_id=template_id, content=content, params=params)

    def _generate_custom(self, hook_type: str) -> GeneratedTemplate:
        """Pede o caminho do script até ele passar na validação."""
        for _ in range(self.MAX_CUSTOM_ATTEMPTS):
            answer = self.prompter.text(f"Caminho do template customizado para {hook_type}")
            custom_path = self._resolve_path(answer)

            if custom_path is None:
                print_error("Nenhum caminho informado")
                continue

            if validate_template(custom_path):
                content = custom_path.read_bytes()
                return GeneratedTemplate(
                    template_id=CUSTOM_TEMPLATE,
                    content=content,
                    params={"template": CUSTOM_TEMPLATE, "path": str(custom_path)},
                )

        raise TemplateSelectionError(
            f"Template customizado rejeitado após {self.MAX_CUSTOM_ATTEMPTS} tentativas"
        )

    @staticmethod
    def _resolve_path(answer: str) -> Optional[Path]:
        answer = answer.strip().strip('"').strip("'")
        if not answer:
            return None
        return Path(answer).expanduser().resolve()


__all__ = [
    "TemplateSelector",
    "TemplateSelectionError",
]
