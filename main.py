#!/usr/bin/env python3
"""Example entry point printing a few serialized metric lines"""
import sys
from datetime import datetime, timezone

from config import SerializerConfig
from logging_config import setup_structured_logging, get_logger, log_error
from metrics_lines import MetricError, MetricsSerializer
from metrics_lines import factory


def build_example_metrics():
    """Metrics covering every value type"""
    dimensions = [("dim1", "val1")]
    return [
        factory.create_int_counter_delta("long-counter", 23, dimensions, datetime.now(timezone.utc)),
        factory.create_int_gauge("long-gauge", 34, dimensions, datetime(2021, 1, 1, 12, tzinfo=timezone.utc)),
        factory.create_int_summary("long-summary", 3, 5, 18, 4, dimensions),
        factory.create_float_counter_delta("double-counter", 3.1415),
        factory.create_float_gauge("double-gauge", 4.567, dimensions),
        factory.create_float_summary("double-summary", 3.1, 6.543, 20.123, 4, dimensions),
    ]


def main():
    """Main application entry point"""
    try:
        config = SerializerConfig()
        setup_structured_logging(config)
        logger = get_logger(__name__)

        serializer = MetricsSerializer.from_config(config, logger=logger)
        metrics = build_example_metrics()
        for metric in metrics:
            print(serializer.serialize_metric(metric))

        logger.info("Example metrics serialized", metrics_count=len(metrics))

        # invalid metrics are rejected upon creation
        try:
            factory.create_int_summary("metric", 100, 10, 10, 3)
        except MetricError as e:
            logger.info("Invalid metric rejected", error=str(e))

    except Exception as e:
        logger = get_logger(__name__)
        log_error(logger, e, {"component": "main"})
        sys.exit(1)


if __name__ == '__main__':
    main()
