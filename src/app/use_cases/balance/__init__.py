"""Use cases da consulta de saldo."""

from .check_balance import CheckBalanceUseCase

__all__ = ["CheckBalanceUseCase"]
