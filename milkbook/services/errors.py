# milkbook/services/errors.py

"""
Domain errors raised by the ledger services.

The API layer turns each of these into a JSON response with a ``detail``
message, see ``milkbook.main``.
"""


class LedgerError(Exception):
    status_code = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(LedgerError):
    status_code = 422


class ConflictError(LedgerError):
    status_code = 409


class NotFoundError(LedgerError):
    status_code = 404
