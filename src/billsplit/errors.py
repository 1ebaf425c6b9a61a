from __future__ import annotations


class BillSplitError(Exception):
    pass


class InvalidArgumentError(BillSplitError, ValueError):
    pass


class InvalidBillStateError(BillSplitError, ZeroDivisionError):
    pass
