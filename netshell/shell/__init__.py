"""Command definitions, builders, parsing errors, and a line buffer with key bindings."""