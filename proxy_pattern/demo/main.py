"""
Proxy Pattern Demo Application

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

This demo runs the same client code twice:
- against a real subject
- against a proxy wrapping that same real subject
"""

import sys
from typing import Optional

from proxy_pattern.core.config import Config
from proxy_pattern.core.subject import RealSubject, Proxy
from proxy_pattern.core.client import Client


def main(config: Optional[Config] = None) -> int:
    """Main demo function"""
    config = config or Config()
    config.configure_logging()

    client = Client()

    # Using the real subject directly
    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    client.client_code(real_subject)

    print()

    # Using the proxy in place of the real subject
    print("Client: Executing the same client code with a proxy:")
    proxy = Proxy(real_subject)
    client.client_code(proxy)

    return 0


if __name__ == "__main__":
    try:
        exit_code = main()
        sys.exit(exit_code)
    except KeyboardInterrupt:
        print("\nDemo interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\nUnexpected error: {e}")
        sys.exit(1)
