"""Operator-wide settings for the Hadoop init container."""

from dataclasses import dataclass

HADOOP_INIT_CONTAINER_IMAGE_DEFAULT = "alpine:3.10"
"""Default image for the Hadoop init container."""

HADOOP_INIT_CONTAINER_TEMPLATE_FILE_DEFAULT = "/etc/config/initContainer.yaml"
"""Default template file for the Hadoop init container."""


@dataclass
class OperatorConfig:
    """Global configuration of the operator."""

    hadoop_init_container_template_file: str = HADOOP_INIT_CONTAINER_TEMPLATE_FILE_DEFAULT
    hadoop_init_container_image: str = HADOOP_INIT_CONTAINER_IMAGE_DEFAULT

    def reset(self) -> None:
        """Restore every setting to its default."""
        self.hadoop_init_container_template_file = HADOOP_INIT_CONTAINER_TEMPLATE_FILE_DEFAULT
        self.hadoop_init_container_image = HADOOP_INIT_CONTAINER_IMAGE_DEFAULT


config = OperatorConfig()
"""The process-wide configuration instance."""