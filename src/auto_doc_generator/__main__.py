"""Allow ``python -m auto_doc_generator FILE``."""
import sys

from auto_doc_generator.cli import main

sys.exit(main())
