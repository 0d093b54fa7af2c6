"""Protocol buffer modules for ``protos/mailinglist.proto``."""
