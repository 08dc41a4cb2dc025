#!/usr/bin/env python3
"""Regenerate ethers-v5 contract bindings from ../out into ../ts/src/ethers-contracts."""

from __future__ import annotations

from bindgenctl.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main(self_path=__file__))
