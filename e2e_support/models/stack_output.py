from pydantic.dataclasses import dataclass

# Field names follow the `aws cloudformation describe-stacks` JSON keys.
@dataclass(frozen=True)
class StackOutput:
    OutputKey: str = ""
    OutputValue: str = ""
    ExportName: str = ""
