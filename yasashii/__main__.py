from __future__ import annotations

import uvicorn

from .config import _i, _s


def main() -> None:
    uvicorn.run(
        "yasashii.main:app",
        host=_s("YASASHII_HOST", "127.0.0.1"),
        port=_i("YASASHII_PORT", 8000),
    )


if __name__ == "__main__":
    main()
