# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import os

from taskhub.app import create_app


def main() -> None:
    app = create_app()
    host = os.environ.get("HOST", "127.0.0.1")
    port = int(os.environ.get("PORT", "5000"))
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
