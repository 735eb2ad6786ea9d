"""In-memory fake repositories and unit of work for testing.

These implement the same abstract interfaces as the SQL repositories but
keep everything in dicts.  Objects are copied on the way in and out, and
the unit of work restores a snapshot on rollback, so the fakes behave
like a transactional store.
"""

from __future__ import annotations

import copy
from decimal import Decimal

from mythic.domain.exceptions import PersistenceError
from mythic.domain.model.event import AnalyticsEvent, EventKind
from mythic.domain.model.order import Order
from mythic.domain.model.product import Category, Product
from mythic.domain.model.user import User
from mythic.domain.repository.event_repository import EventRepository
from mythic.domain.repository.order_repository import OrderRepository
from mythic.domain.repository.product_repository import CategoryRepository, ProductRepository
from mythic.domain.repository.unit_of_work import UnitOfWork
from mythic.domain.repository.user_repository import UserRepository


class _DictStore:

    def __init__(self) -> None:
        self._store: dict = {}

    def snapshot(self):
        return copy.deepcopy(self._store)

    def restore(self, state) -> None:
        self._store = copy.deepcopy(state)


class FakeProductRepository(_DictStore, ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__()
        self.lock_requests = 0
        for p in products or []:
            self._store[p.id] = copy.deepcopy(p)

    def get_by_id(self, product_id: str) -> Product | None:
        return copy.deepcopy(self._store.get(product_id))

    def get_many(self, product_ids: list[str], lock: bool = False) -> list[Product]:
        if lock:
            self.lock_requests += 1
        return [copy.deepcopy(self._store[i]) for i in product_ids if i in self._store]

    def search(
        self,
        name: str | None = None,
        description: str | None = None,
        max_price: Decimal | None = None,
    ) -> list[Product]:
        result = []
        for p in self._store.values():
            if name is not None and name.lower() not in p.name.lower():
                continue
            if description is not None and description.lower() not in p.description.lower():
                continue
            if max_price is not None and p.price.amount > max_price:
                continue
            result.append(copy.deepcopy(p))
        return sorted(result, key=lambda p: (p.name, p.id))

    def save(self, product: Product) -> None:
        self._store[product.id] = copy.deepcopy(product)

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class FakeCategoryRepository(_DictStore, CategoryRepository):

    def __init__(self, categories: list[Category] | None = None) -> None:
        super().__init__()
        for c in categories or []:
            self._store[c.id] = copy.deepcopy(c)

    def get_by_id(self, category_id: str) -> Category | None:
        return copy.deepcopy(self._store.get(category_id))

    def get_many(self, category_ids: list[str], lock: bool = False) -> list[Category]:
        return [copy.deepcopy(self._store[i]) for i in category_ids if i in self._store]

    def list_all(self) -> list[Category]:
        return sorted((copy.deepcopy(c) for c in self._store.values()), key=lambda c: c.name)

    def save(self, category: Category) -> None:
        self._store[category.id] = copy.deepcopy(category)


class FakeUserRepository(_DictStore, UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        super().__init__()
        for u in users or []:
            self._store[u.id] = copy.deepcopy(u)

    def get_by_id(self, user_id: str) -> User | None:
        return copy.deepcopy(self._store.get(user_id))

    def get_by_email(self, email: str) -> User | None:
        for u in self._store.values():
            if str(u.email) == email:
                return copy.deepcopy(u)
        return None

    def list_all(self) -> list[User]:
        return [copy.deepcopy(u) for u in self._store.values()]

    def save(self, user: User) -> None:
        self._store[user.id] = copy.deepcopy(user)

    def delete(self, user_id: str) -> None:
        self._store.pop(user_id, None)


class FakeOrderRepository(OrderRepository):
    """Keeps headers and lines apart, like the two SQL tables.

    Lines are read back ordered by product id.

    ``fail_on_line=n`` makes the n-th ``add_line`` call raise a
    PersistenceError, simulating a crash mid-write.
    """

    def __init__(self, fail_on_line: int | None = None) -> None:
        self.headers: dict[str, Order] = {}
        self.lines: list[tuple[str, str]] = []
        self._fail_on_line = fail_on_line
        self._line_calls = 0

    def get_by_id(self, order_id: str) -> Order | None:
        header = self.headers.get(order_id)
        if header is None:
            return None
        order = copy.deepcopy(header)
        order.product_ids = tuple(sorted(p for o, p in self.lines if o == order_id))
        return order

    def list_all(self) -> list[Order]:
        return [self.get_by_id(order_id) for order_id in self.headers]

    def add_header(self, order: Order) -> None:
        header = copy.deepcopy(order)
        header.product_ids = ()
        self.headers[order.id] = header

    def add_line(self, order_id: str, product_id: str) -> None:
        self._line_calls += 1
        if self._fail_on_line is not None and self._line_calls == self._fail_on_line:
            raise PersistenceError("simulated line insert failure", retryable=True)
        self.lines.append((order_id, product_id))

    def delete(self, order_id: str) -> None:
        self.lines = [(o, p) for o, p in self.lines if o != order_id]
        self.headers.pop(order_id, None)

    def references_product(self, product_id: str) -> bool:
        return any(p == product_id for _, p in self.lines)

    def snapshot(self):
        return copy.deepcopy((self.headers, self.lines))

    def restore(self, state) -> None:
        self.headers, self.lines = copy.deepcopy(state)


class FakeEventRepository(_DictStore, EventRepository):

    def get_by_id(self, kind: EventKind, event_id: str) -> AnalyticsEvent | None:
        event = self._store.get(event_id)
        if event is None or event.kind is not kind:
            return None
        return copy.deepcopy(event)

    def list_by_kind(self, kind: EventKind) -> list[AnalyticsEvent]:
        return [copy.deepcopy(e) for e in self._store.values() if e.kind is kind]

    def list_by_visitor(self, kind: EventKind, visitor: str) -> list[AnalyticsEvent]:
        return [e for e in self.list_by_kind(kind) if e.visitor == visitor]

    def save(self, event: AnalyticsEvent) -> None:
        self._store[event.id] = copy.deepcopy(event)

    def delete(self, kind: EventKind, event_id: str) -> None:
        if self.get_by_id(kind, event_id) is not None:
            del self._store[event_id]


class FakeUnitOfWork(UnitOfWork):
    """Snapshots every repository; rollback and uncommitted exits restore it."""

    def __init__(
        self,
        products: FakeProductRepository | None = None,
        categories: FakeCategoryRepository | None = None,
        users: FakeUserRepository | None = None,
        orders: FakeOrderRepository | None = None,
        events: FakeEventRepository | None = None,
    ) -> None:
        self.products = products or FakeProductRepository()
        self.categories = categories or FakeCategoryRepository()
        self.users = users or FakeUserRepository()
        self.orders = orders or FakeOrderRepository()
        self.events = events or FakeEventRepository()
        self.commits = 0
        self.rollbacks = 0
        self._committed = self._snapshot()

    def __enter__(self) -> FakeUnitOfWork:
        self._committed = self._snapshot()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        super().__exit__(exc_type, exc, tb)
        self._restore(self._committed)

    def commit(self) -> None:
        self.commits += 1
        self._committed = self._snapshot()

    def rollback(self) -> None:
        self.rollbacks += 1
        self._restore(self._committed)

    def _repos(self) -> list:
        return [self.products, self.categories, self.users, self.orders, self.events]

    def _snapshot(self) -> list:
        return [repo.snapshot() for repo in self._repos()]

    def _restore(self, state: list) -> None:
        for repo, repo_state in zip(self._repos(), state):
            repo.restore(repo_state)
