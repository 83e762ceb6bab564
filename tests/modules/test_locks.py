import asyncio

from digiwallet.modules.wallets import WalletLockRegistry


async def test_same_wallet_is_serialized():
    registry = WalletLockRegistry()
    events = []

    async def worker(name):
        async with registry.hold(1):
            events.append(f"{name}-in")
            await asyncio.sleep(0.01)
            events.append(f"{name}-out")

    await asyncio.gather(worker("a"), worker("b"))

    assert events in (["a-in", "a-out", "b-in", "b-out"], ["b-in", "b-out", "a-in", "a-out"])


async def test_different_wallets_do_not_block():
    registry = WalletLockRegistry()
    inside = asyncio.Event()

    async def holder():
        async with registry.hold(1):
            inside.set()
            await asyncio.sleep(0.05)

    task = asyncio.create_task(holder())
    await inside.wait()
    async with registry.hold(2):
        assert len(registry) == 2
    await task


async def test_entries_are_released():
    registry = WalletLockRegistry()

    async with registry.hold(7):
        assert len(registry) == 1

    assert len(registry) == 0


async def test_released_after_error():
    registry = WalletLockRegistry()

    try:
        async with registry.hold(3):
            raise ValueError("boom")
    except ValueError:
        pass

    assert len(registry) == 0
