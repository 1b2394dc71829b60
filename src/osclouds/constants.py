APP_NAME = "osclouds"
ENV_PREFIX = "OSCLOUDS_"
