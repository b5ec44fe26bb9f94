# scripts/main.py

from __future__ import annotations

from spaceballs.app import main

if __name__ == "__main__":
    main()
