"""
Basic proxy usage example.

This example demonstrates:
- Wrapping a real subject in a proxy
- Extending the proxy with a different access check
- Watching the proxy's decisions through debug logging
"""

from proxy_pattern import Config, Client, Proxy, RealSubject


class ClosedProxy(Proxy):
    """Proxy that turns every request away"""

    def check_access(self) -> bool:
        print("ClosedProxy: Access refused.")
        return False


def basic_example():
    """Demonstrate basic proxy usage"""
    Config(log_level="DEBUG").configure_logging()

    client = Client()
    real_subject = RealSubject()

    print("Open proxy:")
    client.client_code(Proxy(real_subject))
    print()

    print("Closed proxy:")
    client.client_code(ClosedProxy(real_subject))


if __name__ == "__main__":
    basic_example()
