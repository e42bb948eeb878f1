"""Dictionary and HMM based word segmentation, tagging and keyword extraction."""