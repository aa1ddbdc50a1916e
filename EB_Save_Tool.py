#!/usr/bin/env python3
import sys

from ebsave.apps.save_tool import main

if __name__ == '__main__':
    sys.exit(main())
