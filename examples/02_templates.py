"""
Templates - Reuse one base configuration for many requests
"""
from codeflush import Endpoint, HTTPS, RequestBody


def main():
    api = Endpoint.for_host(HTTPS, "httpbin.org")

    # Everything shared by the requests below
    base = (api.resolve("anything")
            .post()
            .parameter("api_version", "2")
            .header("Accept", "application/json")
            .body(RequestBody.for_json({"kind": "default"}))
            .template())

    first = base.enrich().parameter("page", "1").build()
    second = base.enrich().parameter("api_version", "3").body(RequestBody.for_json({"kind": "custom"})).build()

    print(first.request_url)
    print(second.request_url)
    print(f"Template still sends: {base.build().request_url}")


if __name__ == "__main__":
    main()
