import logging

jar_logger = logging.getLogger("cookiestorage.jar")
internal_logger = logging.getLogger("cookiestorage.internal")
