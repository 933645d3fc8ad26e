"""Kubernetes deployment of the application chart.

- HelmDeployer: installs or upgrades a chart release with Helm
"""

from mou_deploy.errors import DeploymentError

from .helm_deployer import HelmDeployer

__all__ = ["HelmDeployer", "DeploymentError"]
