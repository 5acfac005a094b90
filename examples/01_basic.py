"""
Basic usage - Build a request and send it
"""
from codeflush import Endpoint, HTTPS, JSONParser, RequestsHTTPClient


def main():
    api = Endpoint.for_host(HTTPS, "httpbin.org")

    request = (api.resolve("get")
               .get()
               .parameter("search", "immutable requests")
               .parameter("verbose")
               .header("Accept", "application/json")
               .build())

    print(f"Request URL: {request.request_url}")

    with RequestsHTTPClient() as client:
        response = request.execute(client, JSONParser())
        print(f"Status: {response.status_code}")
        print(f"Echoed args: {response.body['args']}")


if __name__ == "__main__":
    main()
