# -*- coding: utf-8 -*-
"""
Standalone launcher for the GaussianTrack host.

This script exists as a convenience entry point so that end-users can start the
host simply by running:

    python GaussianTrack.py

It performs no application logic itself; it delegates to `gaussiantrack.main`.
Pass ``--standalone`` to open the spot-fitting window without the host shell.
"""

# GaussianTrack.py
from gaussiantrack.main import main

if __name__ == "__main__":
    main()
