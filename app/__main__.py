from __future__ import annotations

import uvicorn

from app.config import S


def main() -> None:
    uvicorn.run("app.main:app", host=S.HOST, port=S.PORT)


if __name__ == "__main__":
    main()
