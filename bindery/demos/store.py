from __future__ import annotations

import asyncio
import dataclasses

from .. import constants, t
from .. import messages as m
from ..do import do
from ..future import Deferred, deferred, isOk

danielsUrl = "my.store.com/users/daniel"


@dataclasses.dataclass(frozen=True)
class User:
    id: str


@dataclasses.dataclass(frozen=True)
class Product:
    sku: str
    price: float


@deferred
async def _fetchUser(url: str) -> User:
    await asyncio.sleep(0)
    return User("daniel")  # sample implementation


@deferred
async def _fetchLastOrder(userId: str) -> Product:
    await asyncio.sleep(0)
    return Product("123-456", 99.99)  # sample implementation


def fetchUser(url: str, attempts: int = constants.fetchAttempts) -> Deferred[User]:
    return _fetchUser(url).retrying(attempts)


def fetchLastOrder(userId: str, attempts: int = constants.fetchAttempts) -> Deferred[Product]:
    return _fetchLastOrder(userId).retrying(attempts)


def withVat(price: float, vatRate: float = constants.vatRate) -> float:
    return price * vatRate


async def vatInclusivePriceCallbacks(
    url: str,
    vatRate: float = constants.vatRate,
    attempts: int = constants.fetchAttempts,
) -> float:
    # Extract, transform, wrap, by hand, one callback inside another.
    answer: asyncio.Future[float] = asyncio.get_running_loop().create_future()

    def onUser(userOutcome: t.OutcomeT) -> None:
        if not isOk(userOutcome):
            answer.set_exception(userOutcome.err())
            return

        def onOrder(orderOutcome: t.OutcomeT) -> None:
            if not isOk(orderOutcome):
                answer.set_exception(orderOutcome.err())
                return
            answer.set_result(withVat(orderOutcome.ok().price, vatRate))

        fetchLastOrder(userOutcome.ok().id, attempts).onComplete(onOrder)

    fetchUser(url, attempts).onComplete(onUser)
    return await answer


def vatInclusivePrice(
    url: str,
    vatRate: float = constants.vatRate,
    attempts: int = constants.fetchAttempts,
) -> Deferred[float]:
    return (
        fetchUser(url, attempts)
        .bind(lambda user: fetchLastOrder(user.id, attempts))
        .map(lambda product: withVat(product.price, vatRate))
    )


@do(Deferred)
def vatInclusivePriceFor(
    url: str,
    vatRate: float = constants.vatRate,
    attempts: int = constants.fetchAttempts,
) -> t.Generator[Deferred[t.Any], t.Any, float]:
    user = yield fetchUser(url, attempts)
    product = yield fetchLastOrder(user.id, attempts)
    return withVat(product.price, vatRate)


def run(vatRate: float = constants.vatRate, attempts: int = constants.fetchAttempts) -> None:
    m.say(f"Pricing the last order for {danielsUrl}, VAT included:")
    m.say(f"  callbacks: {asyncio.run(vatInclusivePriceCallbacks(danielsUrl, vatRate, attempts)):.2f}")
    m.say(f"  bind/map: {vatInclusivePrice(danielsUrl, vatRate, attempts).get():.2f}")
    m.say(f"  comprehension: {vatInclusivePriceFor(danielsUrl, vatRate, attempts).get():.2f}")
