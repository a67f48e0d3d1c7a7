"""
Breaker Module Entry Point
===========================

Allows running the Breaker CLI via: python -m breaker
"""

from breaker.cli import main

if __name__ == "__main__":
    main()
