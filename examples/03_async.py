"""
Async usage - Share one request across concurrent sends
"""
import asyncio
from codeflush import AIOHTTPClient, ClientConfig, Endpoint, HTTPS, TextParser


async def main():
    config = ClientConfig.with_charset("utf-8", user_agent="codeflush-example/1.0")
    request = (Endpoint.for_host(HTTPS, "httpbin.org", config=config)
               .resolve("user-agent")
               .get()
               .build())

    async with AIOHTTPClient(config) as client:
        responses = await asyncio.gather(*(
            request.execute_async(client, TextParser()) for _ in range(3)
        ))

    for response in responses:
        print(response.status_code, response.body.strip())


if __name__ == "__main__":
    asyncio.run(main())
