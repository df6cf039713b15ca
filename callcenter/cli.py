"""Interactive menu for operating the call center."""

from __future__ import annotations

import argparse
import re
import sys
from typing import TextIO

from .calls import MAX_NAME, MAX_REASON, Call, Priority
from .service import CallCenter, format_attendance

MENU = (
    "========== MENU ==========\n"
    "1. Adicionar nova chamada\n"
    "2. Visualizar filas\n"
    "3. Atender proxima chamada\n"
    "4. Visualizar historico\n"
    "5. Gerar relatorio e sair\n"
    "==========================\n"
    "Escolha uma opcao: "
)

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class _EndOfInput(Exception):
    pass


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise _EndOfInput
    return line.rstrip("\n")


def _parse_int(text: str) -> int | None:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else None


def _read_call(stdin: TextIO, stdout: TextIO) -> Call:
    stdout.write("\nDigite o nome do cliente: ")
    name = _read_line(stdin)[: MAX_NAME - 1]
    stdout.write("Digite o motivo da ligacao: ")
    reason = _read_line(stdin)[: MAX_REASON - 1]
    stdout.write("Prioridade (1 = alta, 2 = media, 3 = baixa): ")
    priority = _parse_int(_read_line(stdin))
    return Call(name, reason, Priority.LOW if priority is None else priority)


def run(stdin: TextIO, stdout: TextIO, center: CallCenter | None = None) -> int:
    """Run the menu loop until the report option is chosen or input ends."""
    center = center if center is not None else CallCenter()
    try:
        while True:
            stdout.write(MENU)
            option = _parse_int(_read_line(stdin))
            if option == 1:
                center.add_call(_read_call(stdin, stdout))
                stdout.write("\n✅ Chamada adicionada com sucesso!\n\n")
            elif option == 2:
                for priority in Priority:
                    stdout.write(center.queues.format_queue(priority))
                stdout.write("\n")
            elif option == 3:
                entry = center.attend_next()
                if entry is None:
                    stdout.write("\nNenhuma chamada na fila para atendimento.\n\n")
                else:
                    stdout.write(format_attendance(entry))
            elif option == 4:
                stdout.write(center.history.format())
            elif option == 5:
                stdout.write(center.report())
                center.history.clear()
                return 0
            else:
                stdout.write("\n❌ Opcao invalida! Tente novamente.\n\n")
    except _EndOfInput:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive call center menu on the terminal."""
    parser = argparse.ArgumentParser(
        prog="callcenter", description="Priority call queue with attendance history."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())