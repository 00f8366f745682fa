"""Package entry point for ``python -m mime_encoders``.

WHY: Users run the encoder as ``python -m mime_encoders input.bin`` to
pipe a file through any registered content transfer encoding.

HOW: Delegates to the CLI's main() function.
"""

from mime_encoders.cli import main

if __name__ == "__main__":
    main()
