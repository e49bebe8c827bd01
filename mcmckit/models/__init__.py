"""Example targets: a Gaussian mixture, normal-mean and normal models, and normal metric helpers."""