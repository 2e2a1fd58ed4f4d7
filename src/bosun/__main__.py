"""Bosun MCPサーバーのコマンドラインエントリポイント。"""

if __name__ == "__main__":
    import logging

    import uvicorn
    from starlette.middleware import Middleware

    from bosun.config import ServerConfig
    from bosun.middleware import TokenAuthMiddleware
    from bosun.server import create_server

    config = ServerConfig()
    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger = logging.getLogger("bosun")

    mcp = create_server(config)
    app = mcp.http_app(
        transport="streamable-http",
        middleware=[Middleware(TokenAuthMiddleware, url_token=config.url_token)],
    )
    logger.info(
        "starting bosun on %s:%d (rules_file=%s, token auth %s)",
        config.host,
        config.port,
        config.rules_file or "-",
        "enabled" if config.url_token else "disabled",
    )
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
