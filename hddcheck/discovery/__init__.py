"""Device discovery, classification and SMART attribute extraction."""
from hddcheck.discovery.classifier import DeviceClassifier
from hddcheck.discovery.extractor import AttributeExtractor
from hddcheck.discovery.partitions import PartitionInspector
from hddcheck.discovery.scanner import DeviceDiscovery

__all__ = ['DeviceDiscovery', 'DeviceClassifier', 'AttributeExtractor', 'PartitionInspector']
