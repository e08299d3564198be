from .machine_image import (
    Architecture,
    ImageClass,
    ImageCreateOptions,
    MachineImage,
    MachineImageState,
    MachineImageType,
    Platform,
    ProviderContext,
    ResourceStatus,
)
from .inventory import GuestOsEntry, GuestOsMatch, RuntimeInfo, TemplateConfig, POWERED_OFF, POWERED_ON, SUSPENDED
from .image_filter import ImageFilterOptions
from .async_task import AsynchronousTask
