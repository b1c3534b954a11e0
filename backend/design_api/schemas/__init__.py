from design_api.schemas.design import (
    DesignSave,
    DesignGenerateRequest,
    DesignResponse,
    DesignEnvelope,
    DesignListEnvelope,
    MessageEnvelope,
)

__all__ = [
    "DesignSave",
    "DesignGenerateRequest",
    "DesignResponse",
    "DesignEnvelope",
    "DesignListEnvelope",
    "MessageEnvelope",
]
