"""
HOOKPILOT - Interactive Prompts
Perguntas ao usuário no terminal (seleção, múltipla escolha, confirmação).
"""

from typing import List, Optional, Sequence

from rich.prompt import Confirm, IntPrompt, Prompt

from .output import console


class Prompter:
    """
    Interface de perguntas usada pelos comandos.

    Os componentes recebem uma instância em vez de chamar o terminal
    diretamente, o que permite respostas roteirizadas nos testes.
    """

    def select(
        self,
        message: str,
        choices: Sequence[str],
        labels: Optional[Sequence[str]] = None,
    ) -> str:
        """
        Seleção única numa lista numerada.

        Args:
            message: Pergunta
            choices: Valores retornáveis
            labels: Texto exibido para cada valor (default: o próprio valor)

        Returns:
            Valor escolhido
        """
        labels = list(labels or choices)

        console.print(f"\n{message}", style="bold cyan", markup=False)
        for idx, label in enumerate(labels, start=1):
            console.print(f"  {idx}. {label}", markup=False)

        answer = IntPrompt.ask(
            "Opção",
            console=console,
            choices=[str(i) for i in range(1, len(choices) + 1)],
            show_choices=False,
        )
        return choices[answer - 1]

    def multiselect(self, message: str, choices: Sequence[str]) -> List[str]:
        """
        Múltipla escolha: números separados por vírgula, `all` ou vazio.

        Returns:
            Valores escolhidos na ordem da lista original
        """
        console.print(f"\n{message}", style="bold cyan", markup=False)
        for idx, choice in enumerate(choices, start=1):
            console.print(f"  {idx}. {choice}", markup=False)

        while True:
            answer = Prompt.ask(
                "Números separados por vírgula (ou 'all')",
                console=console,
                default="",
                show_default=False,
            )
            selected = parse_multiselect(answer, choices)
            if selected is not None:
                return selected
            console.print("Seleção inválida, tente novamente.", style="red", markup=False)

    def confirm(self, message: str, default: Optional[bool] = None) -> bool:
        """Confirmação y/n. Sem default, exige resposta explícita."""
        if default is None:
            return Confirm.ask(message, console=console)
        return Confirm.ask(message, console=console, default=default)

    def text(self, message: str, default: Optional[str] = None) -> str:
        if default is None:
            return Prompt.ask(message, console=console).strip()
        return Prompt.ask(message, console=console, default=default).strip()


def parse_multiselect(answer: str, choices: Sequence[str]) -> Optional[List[str]]:
    """
    Converte a resposta de múltipla escolha.

    Returns:
        Lista de valores (possivelmente vazia) ou None se a resposta for inválida
    """
    answer = answer.strip().lower()

    if not answer:
        return []

    if answer in ("all", "*"):
        return list(choices)

    indexes = set()
    for part in answer.split(","):
        part = part.strip()
        if not part:
            continue
        if not part.isdigit():
            return None
        idx = int(part)
        if not (1 <= idx <= len(choices)):
            return None
        indexes.add(idx - 1)

    return [choice for idx, choice in enumerate(choices) if idx in indexes]


__all__ = [
    "Prompter",
    "parse_multiselect",
]
