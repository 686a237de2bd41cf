"""Pixel buffers, pixel formats, named colours and XPM loading."""