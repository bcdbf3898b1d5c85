"""Simple bank accounts with holders identified by CPF."""

from __future__ import annotations

import argparse
from contextlib import ExitStack
from dataclasses import dataclass

MIN_NAME_LENGTH = 5


class InvalidAmountError(ValueError):
    def __init__(self) -> None:
        super().__init__("Valor Inválido")


class InsufficientFundsError(ValueError):
    def __init__(self) -> None:
        super().__init__("Saldo Insuficiente")


class NameTooShortError(ValueError):
    def __init__(self) -> None:
        super().__init__("Nome muito curto")


@dataclass(frozen=True)
class Cpf:
    numero: str


@dataclass(frozen=True)
class Titular:
    cpf: Cpf
    nome: str

    def __post_init__(self) -> None:
        if len(self.nome) < MIN_NAME_LENGTH:
            raise NameTooShortError()


class Conta:
    """A bank account; open accounts are counted until they are closed."""

    _numero_de_contas = 0

    def __init__(self, numero: str, titular: Titular) -> None:
        self._numero = numero
        self.titular = titular
        self._saldo = 0.0
        self._open = True
        Conta._numero_de_contas += 1

    @property
    def numero(self) -> str:
        return self._numero

    @property
    def saldo(self) -> float:
        return self._saldo

    def sacar(self, valor: float) -> None:
        if valor < 0:
            raise InvalidAmountError()
        if valor > self._saldo:
            raise InsufficientFundsError()
        self._saldo -= valor

    def depositar(self, valor: float) -> None:
        if valor < 0:
            raise InvalidAmountError()
        self._saldo += valor

    def close(self) -> None:
        """Stop counting this account; closing twice has no further effect."""
        if self._open:
            self._open = False
            Conta._numero_de_contas -= 1

    def __enter__(self) -> Conta:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @classmethod
    def numero_de_contas(cls) -> int:
        return Conta._numero_de_contas

    def __str__(self) -> str:
        return (
            f"Titular: {self.titular.nome}\n"
            f"CPF: {self.titular.cpf.numero}\n"
            f"Conta: {self.numero}\n"
            f"Saldo: R$ {self.saldo:g}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="banco", description="Demonstracao de contas")
    parser.parse_args(argv)

    with ExitStack() as stack:
        uma_conta = stack.enter_context(
            Conta("123456", Titular(Cpf("123.456.789-10"), "Nikolas"))
        )
        uma_conta.depositar(2570)
        uma_conta.sacar(1945)

        outra_conta = stack.enter_context(
            Conta("654321", Titular(Cpf("234.567.891-01"), "Teste"))
        )
        outra_conta.depositar(800)
        outra_conta.sacar(249)

        print("Conta 1: ")
        print(uma_conta)
        print()
        print("Conta 2: ")
        print(outra_conta)
        print()
        print(f"Total de Contas: {Conta.numero_de_contas()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())