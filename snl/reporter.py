import sys

class Reporter():
    """
    report front-end errors, tagged with the pipeline section they come from
    """
    def __init__(self, stream = None):
        self.errors  = []
        self.section = None
        self.stream  = stream or sys.stderr

    def crash(self, errstr):
        print("=== Error backlog ===", file=self.stream)

        for err in self.errors:
            print(f"[ Error ] {err}", file=self.stream)

        errstr = f"{{{self.section}}} \t| " + errstr if self.section else errstr
        print(f"[ Fatal Error ] | {errstr}", file=self.stream)

        sys.exit(1)

    def log(self, error, position = None):
        match error:
            case list():
                for err in error:
                    self.log(err)
            case _ if position is not None:
                self.errors.append(self._tag(f"line {position[0]}, column {position[1]}: {error}"))
            case _ if hasattr(error, "position"):
                self.errors.append(self._tag(f"line {error.line}, column {error.column}: {error.value}"))
            case _:
                self.errors.append(self._tag(str(error)))

    def checkpoint(self, section = None):
        self.section = section

        if self.errors:
            self.crash("error backlog at checkpoint")

    def _tag(self, errstr):
        return f"{{{self.section}}} \t| " + errstr if self.section else errstr
