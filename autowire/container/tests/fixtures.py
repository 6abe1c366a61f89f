"""Module-level classes so tests can address them by dotted identifier."""

from abc import ABC, abstractmethod
from typing import Optional, Protocol

from autowire.container.container import Container

MODULE = "autowire.container.tests.fixtures"


class NoConstructor:
    pass


class EmptyConstructor:
    def __init__(self) -> None:
        self.value = 42


class Inner:
    pass


class Outer:
    def __init__(self, inner: Inner) -> None:
        self.inner = inner


class Untyped:
    def __init__(self, count) -> None:  # noqa: ANN001
        self.count = count


class UnionTyped:
    def __init__(self, count: list | int) -> None:
        self.count = count


class OptionalTyped:
    def __init__(self, inner: Optional[Inner]) -> None:
        self.inner = inner


class PrimitiveTyped:
    def __init__(self, count: int) -> None:
        self.count = count


class GenericTyped:
    def __init__(self, items: list[Inner]) -> None:
        self.items = items


class KeywordOnly:
    def __init__(self, inner: Inner, *, outer: Outer) -> None:
        self.inner = inner
        self.outer = outer


class VarArgs:
    def __init__(self, inner: Inner, *args: int, **kwargs: str) -> None:
        self.inner = inner
        self.args = args
        self.kwargs = kwargs


class Exploding:
    def __init__(self) -> None:
        raise RuntimeError("boom")


class UsesLookup:
    def __init__(self) -> None:
        self.dsn = Container().get("dsn")


class UnresolvableHint:
    def __init__(self, dep: "DoesNotExist") -> None:  # noqa: F821
        self.dep = dep


class CycleA:
    def __init__(self, b: "CycleB") -> None:
        self.b = b


class CycleB:
    def __init__(self, a: CycleA) -> None:
        self.a = a


class SelfReferencing:
    def __init__(self, other: "SelfReferencing") -> None:
        self.other = other


class Greeter(Protocol):
    def greet(self) -> str: ...


class NeedsGreeter:
    def __init__(self, greeter: Greeter) -> None:
        self.greeter = greeter


class Registry:
    class Entry:
        pass


# Services mirroring an invoicing flow: interface -> implementation wiring.


class PaymentGatewayInterface(ABC):
    @abstractmethod
    def charge(self, customer: dict, amount: float, tax: float) -> bool: ...


class PaymentGatewayService(PaymentGatewayInterface):
    def charge(self, customer: dict, amount: float, tax: float) -> bool:
        return amount > 0


class SalesTaxService:
    def calculate(self, amount: float, customer: dict) -> float:
        return round(amount * 6.5 / 100, 2)


class EmailService:
    def __init__(self) -> None:
        self.sent: list[dict] = []

    def send(self, customer: dict, template: str) -> bool:
        self.sent.append({"customer": customer, "template": template})
        return True


class InvoiceService:
    def __init__(
        self,
        sales_tax: SalesTaxService,
        gateway: PaymentGatewayInterface,
        email: EmailService,
    ) -> None:
        self.sales_tax = sales_tax
        self.gateway = gateway
        self.email = email

    def process(self, customer: dict, amount: float) -> bool:
        tax = self.sales_tax.calculate(amount, customer)
        if not self.gateway.charge(customer, amount, tax):
            return False
        self.email.send(customer, "receipt")
        return True
