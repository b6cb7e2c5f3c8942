"""
compose2kube Exception Classes

Typed exception hierarchy shared by the parser, the mapping core, the
manifest writer and the CLI.
"""

from typing import Any


class Compose2KubeError(Exception):
    """Base exception for all compose2kube errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


class ValidationError(Compose2KubeError):
    """Raised when command line input validation fails."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        actual_value: Any = None,
    ) -> None:
        context = {}
        if field_name:
            context["field_name"] = field_name
        if actual_value is not None:
            context["actual_value"] = str(actual_value)
        super().__init__(message, "VALIDATION_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the validation error."""
        if "field_name" in self.context:
            return f"Check the value given for '{self.context['field_name']}'"
        return "Check the command line arguments"


class ParseError(Compose2KubeError):
    """Raised when the compose file cannot be turned into service records."""

    def __init__(
        self,
        message: str,
        source_path: Any = None,
        service_name: str | None = None,
        field_name: str | None = None,
    ) -> None:
        context = {}
        if source_path is not None:
            context["source_path"] = str(source_path)
        if service_name:
            context["service"] = service_name
        if field_name:
            context["field"] = field_name
        super().__init__(message, "PARSE_ERROR", context)

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the parse error."""
        if "field" in self.context:
            return f"Fix the '{self.context['field']}' entry in the compose file"
        return "Check that the compose file is valid YAML with a services mapping"


class ServiceTranslationError(Compose2KubeError):
    """
    Base class for input-contract violations found while translating one
    service. These are permanent: retrying with the same input fails again.
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        service_name: str | None = None,
        field_name: str | None = None,
        value: Any = None,
    ) -> None:
        context = {}
        if service_name:
            context["service"] = service_name
        if field_name:
            context["field"] = field_name
        if value is not None:
            context["value"] = repr(value)
        super().__init__(message, error_code, context)
        self.service_name = service_name
        self.field_name = field_name
        self.value = value

    def get_recovery_hint(self) -> str:
        """Provide a helpful hint for fixing the offending field."""
        if self.field_name:
            return f"Fix the '{self.field_name}' setting of the service"
        return "Check the service definition"


class MalformedEnvEntryError(ServiceTranslationError):
    """Raised when an environment entry has no '=' separator."""

    def __init__(self, entry: str, service_name: str | None = None) -> None:
        super().__init__(
            f"Environment entry '{entry}' is not of the form KEY=VALUE",
            "MALFORMED_ENV_ENTRY",
            service_name=service_name,
            field_name="environment",
            value=entry,
        )


class InvalidPortError(ServiceTranslationError):
    """Raised when a port token is not an integer in [1, 65535]."""

    def __init__(
        self, port: str, reason: str, service_name: str | None = None
    ) -> None:
        super().__init__(
            f"Invalid container port '{port}': {reason}",
            "INVALID_PORT",
            service_name=service_name,
            field_name="ports",
            value=port,
        )


class UnknownPullPolicyError(ServiceTranslationError):
    """Raised when the image pull policy override is not a known literal."""

    def __init__(self, policy: str, service_name: str | None = None) -> None:
        super().__init__(
            f"Unknown image pull policy '{policy}' "
            "(expected one of: IfNotPresent, Always, Never)",
            "UNKNOWN_PULL_POLICY",
            service_name=service_name,
            field_name="image_pull_policy",
            value=policy,
        )

    def get_recovery_hint(self) -> str:
        return "Use --image-pull-policy IfNotPresent, Always or Never"


class MalformedNodeSelectorError(ServiceTranslationError):
    """Raised when a node selector pair is not of the form key=value."""

    def __init__(
        self, selector: str, pair: str, service_name: str | None = None
    ) -> None:
        super().__init__(
            f"Node selector pair '{pair}' in '{selector}' is not of the form "
            "key=value",
            "MALFORMED_NODE_SELECTOR",
            service_name=service_name,
            field_name="node_selector",
            value=pair,
        )

    def get_recovery_hint(self) -> str:
        return "Use --node-selector key=value;key2=value2"


class UnknownRestartPolicyError(ServiceTranslationError):
    """Raised when the restart token has no workload kind."""

    def __init__(self, token: str, service_name: str | None = None) -> None:
        super().__init__(
            f"Unknown restart policy '{token}'",
            "UNKNOWN_RESTART_POLICY",
            service_name=service_name,
            field_name="restart",
            value=token,
        )

    def get_recovery_hint(self) -> str:
        return "Set restart to one of: always, no, false, on-failure (or leave unset)"


class InvalidQuantityError(ServiceTranslationError):
    """Raised when a resource value cannot be encoded as a quantity."""

    def __init__(
        self, resource: str, amount: Any, service_name: str | None = None
    ) -> None:
        super().__init__(
            f"Cannot encode {resource} value {amount!r}: must be a positive 64-bit integer",
            "INVALID_QUANTITY",
            service_name=service_name,
            field_name=resource,
            value=amount,
        )


class SerializationError(Compose2KubeError):
    """Raised when a manifest cannot be serialized."""

    def __init__(self, message: str, manifest_name: str | None = None) -> None:
        context = {}
        if manifest_name:
            context["manifest"] = manifest_name
        super().__init__(message, "SERIALIZATION_ERROR", context)


class WriteError(Compose2KubeError):
    """Raised when a serialized manifest cannot be written to disk."""

    def __init__(self, message: str, output_path: Any = None) -> None:
        context = {}
        if output_path is not None:
            context["output_path"] = str(output_path)
        super().__init__(message, "WRITE_ERROR", context)


class TranslationFailedError(Compose2KubeError):
    """Raised at the end of a keep-going run when some services failed."""

    def __init__(self, errors: list[ServiceTranslationError]) -> None:
        services = sorted({e.service_name or "?" for e in errors})
        super().__init__(
            f"{len(errors)} service(s) failed to translate: {', '.join(services)}",
            "TRANSLATION_FAILED",
        )
        self.errors = errors
