import asyncio
import logging

from status_api.address import parse_address
from status_api.errors import InvalidInput, ProtocolError
from status_api.models import ProbeOutcome, ProbeTarget

logger = logging.getLogger('status_api')


async def _teardown(task: asyncio.Future):
    """負けた側のタスクを止め、後片付けが終わるまで待つ"""
    if task.done():
        return
    task.cancel()
    await asyncio.wait({task})
    if not task.cancelled() and task.exception() is not None:
        logger.debug("Abandoned task finished with %r", task.exception())


async def probe(target: ProbeTarget, deadline: float, client) -> ProbeOutcome:
    """締め切り付きで1回だけステータスを問い合わせ、結果を分類する

    タイマーと問い合わせを競争させ、先にタイマーが終われば Timeout。
    問い合わせ側はキャンセルして接続を閉じさせる。リトライはしない。
    """
    logger.debug("Probing %s with %.1fs deadline", target, deadline)
    exchange = asyncio.ensure_future(client.query(target.host, target.port))
    timer = asyncio.ensure_future(asyncio.sleep(deadline))
    try:
        done, _ = await asyncio.wait({exchange, timer}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        await _teardown(timer)
        await _teardown(exchange)

    if exchange not in done:
        logger.info("Probe %s: Timeout after %.1fs", target, deadline)
        return ProbeOutcome.timeout()

    try:
        record = exchange.result()
    except ProtocolError as e:
        logger.warning("Probe %s: ProtocolError (%s)", target, e)
        return ProbeOutcome.protocol_failure()
    except Exception:
        logger.exception("Probe %s: unexpected client error", target)
        return ProbeOutcome.protocol_failure()

    logger.info("Probe %s: Success", target)
    return ProbeOutcome.success(record)


async def probe_address(address: str, deadline: float, client) -> ProbeOutcome:
    """アドレス文字列を解析してからプローブする"""
    try:
        target = parse_address(address)
    except InvalidInput as e:
        logger.info("Probe %r: InvalidInput (%s)", address, e)
        return ProbeOutcome.invalid_input()
    return await probe(target, deadline, client)
