import logging

from aiohttp import web

from status_api import config
from status_api.minecraft_utils import MinecraftServerStatus
from status_api.probe import probe_address
from status_api.shaper import shape_json, shape_text

logger = logging.getLogger('status_api')

CLIENT_KEY = web.AppKey('client', object)


async def status(request: web.Request) -> web.Response:
    """サーバーの稼働状況を Online / Offline で返す"""
    address = request.match_info['address']
    outcome = await probe_address(address, config.TEXT_DEADLINE, request.app[CLIENT_KEY])
    code, body = shape_text(outcome)
    return web.Response(status=code, text=body)


async def status_json(request: web.Request) -> web.Response:
    """サーバーの状態を JSON で返す"""
    address = request.match_info['address']
    outcome = await probe_address(address, config.JSON_DEADLINE, request.app[CLIENT_KEY])
    code, body = shape_json(outcome)
    return web.Response(status=code, text=body, content_type='application/json')


def create_app(client=None) -> web.Application:
    app = web.Application()
    app[CLIENT_KEY] = client if client is not None else MinecraftServerStatus()
    app.add_routes([
        web.get('/{address}', status),
        web.get('/{address}/json', status_json),
    ])
    return app


def setup_logging():
    handlers = [logging.StreamHandler()]
    if config.LOG_FILE:
        handlers.insert(0, logging.FileHandler(config.LOG_FILE))
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def main():
    setup_logging()
    logger.info("Starting status API on %s:%s", config.HOST, config.PORT)
    web.run_app(create_app(), host=config.HOST, port=config.PORT, print=None)


if __name__ == '__main__':
    main()
