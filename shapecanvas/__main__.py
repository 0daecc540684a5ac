"""Entry point for running ShapeCanvas as a module: python -m shapecanvas"""

import sys
from .ui import main

if __name__ == "__main__":
    sys.exit(main())
