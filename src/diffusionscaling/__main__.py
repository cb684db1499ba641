"""Run with: python -m diffusionscaling"""
import sys

from diffusionscaling.main import main

if __name__ == "__main__":
    sys.exit(main())
